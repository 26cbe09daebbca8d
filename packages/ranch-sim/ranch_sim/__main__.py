from ranch_sim.cli import main

raise SystemExit(main())
