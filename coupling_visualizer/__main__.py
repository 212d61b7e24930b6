from coupling_visualizer.cli import main

main()
