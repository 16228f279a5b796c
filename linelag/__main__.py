# linelag/__main__.py - Entry point for python -m linelag
from linelag.cli import cli

cli(prog_name='linelag')
