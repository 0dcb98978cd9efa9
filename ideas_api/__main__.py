from ideas_api.main import run

run()
