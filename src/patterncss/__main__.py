from patterncss.cli.main import cli

cli()
