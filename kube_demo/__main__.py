from kube_demo.main import main

main()
