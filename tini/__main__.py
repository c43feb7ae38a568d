from tini.main import main

main()
