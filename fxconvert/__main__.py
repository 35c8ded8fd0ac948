from fxconvert.main import run

run()
