import logging
import os


def main():
    logging.basicConfig(
        level=os.environ.get("GRIDSNAKE_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    from gridsnake import SnakeGame

    SnakeGame().run()


if __name__ == "__main__":
    main()
