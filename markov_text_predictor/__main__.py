import sys

from markov_text_predictor.cli import main

sys.exit(main())
