# src/stream_dataflow/__main__.py
"""`python -m stream_dataflow`: roda o programa de exemplo e imprime 4, 10 e 16."""

from stream_dataflow.programs.odd_pipeline import main

raise SystemExit(main())
