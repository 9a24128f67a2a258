from feedback_api.main import run

run()
