from issflyover.cli import main

main()
