import asyncio

from reflexive_agent.app import run_reflexive_review
from reflexive_agent.logging_config import setup_logging


def main():
    setup_logging()
    asyncio.run(run_reflexive_review())


if __name__ == "__main__":
    main()
