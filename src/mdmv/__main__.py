from mdmv.cli import cli

cli(prog_name="mdmv")
