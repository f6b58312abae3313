from spellcore.cli import run

run()
