import sys

from gpt_md_translator.cli import main

sys.exit(main())
