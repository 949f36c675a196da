from bytetools.cli import main

main()
