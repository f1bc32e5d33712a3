from nlptour.run_demo import main

main()
