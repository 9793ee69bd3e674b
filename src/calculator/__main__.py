from src.calculator.cli import main

raise SystemExit(main())
