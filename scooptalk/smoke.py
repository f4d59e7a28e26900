"""Posts a sample question to a running /query endpoint and prints the response."""

import os
import sys

import httpx
from dotenv import load_dotenv

DEFAULT_URL = "http://localhost:3000/query"
DEFAULT_QUERY = "What flavors of ice cream do you know about?"


def send_query(query: str, url: str = DEFAULT_URL, timeout: float = 60.0) -> dict:
    response = httpx.post(url, json={"query": query}, timeout=timeout)
    return response.json()


def main() -> int:
    load_dotenv()
    url = os.getenv("SCOOPTALK_URL", DEFAULT_URL)
    query = " ".join(sys.argv[1:]) or DEFAULT_QUERY

    try:
        data = send_query(query, url)
    except (httpx.HTTPError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Response: {data}")
    return 0 if "answer" in data else 1


if __name__ == "__main__":
    sys.exit(main())
