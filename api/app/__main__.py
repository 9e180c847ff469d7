import uvicorn

from app.config import settings


def main():
    print(f"RoastMe AI on http://{settings.api_host}:{settings.api_port}")
    print(f"Model: {settings.claude_model}")
    print(f"Docs: http://{settings.api_host}:{settings.api_port}/docs")
    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
