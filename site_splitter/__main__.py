from site_splitter.main import main

main()
