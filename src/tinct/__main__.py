from tinct.cli import main

main()
