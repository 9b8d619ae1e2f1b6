from git_pr.cli.cli import main

main()
