from schedule_api.main import run

run()
