import uvicorn

from config.settings import get_settings


def main() -> None:
	settings = get_settings()
	uvicorn.run('api.main:app', host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
	main()
