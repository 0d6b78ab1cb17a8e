import asyncio

from reflexive_agent.app import run_reflexive_review
from reflexive_agent.logging_config import setup_logging
from reflexive_agent.validation import analyze_user_data


def show_validation_examples():
    print("\n🔧 Testing Improved Implementation:")
    print("Valid data:", analyze_user_data({"name": "John", "email": "john@example.com"}).to_dict())
    print("Invalid data:", analyze_user_data({}).to_dict())
    print("Null data:", analyze_user_data(None).to_dict())

    print("\n" + "=" * 50)


def main():
    setup_logging()
    show_validation_examples()
    asyncio.run(run_reflexive_review())


if __name__ == "__main__":
    main()
