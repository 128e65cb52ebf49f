from climg.cli.main import main

main()
