#main.py
from nowplaying_notify.cli import app


if __name__ == "__main__":
    app()
