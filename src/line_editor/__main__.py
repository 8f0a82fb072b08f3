from line_editor.cli import main

raise SystemExit(main())
