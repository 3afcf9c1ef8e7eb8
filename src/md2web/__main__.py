from md2web.cli import cli

cli()
