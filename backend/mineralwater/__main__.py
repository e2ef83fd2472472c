from mineralwater.main import run

run()
