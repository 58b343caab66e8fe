from zvdo.cli import run

run()
