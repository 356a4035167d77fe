from statuscheck.main import main

main()
