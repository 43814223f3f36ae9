from chatmock.cli import main

main()
