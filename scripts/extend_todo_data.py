"""
Seed a running server with extra todo items from extra_todo_data.json
by calling the `add` mutation once per item.
"""

import json
import sys
from pathlib import Path

import httpx

GRAPHQL_URL = "http://localhost:8080/graphql"
DATA_FILE = Path(__file__).parent / "extra_todo_data.json"

ADD_TODO = """
mutation AddTodo($title: String!) {
  add(title: $title) { id title completed }
}
"""


def main(url: str = GRAPHQL_URL) -> None:
    todos = json.loads(DATA_FILE.read_text())

    with httpx.Client() as client:
        for i, todo in enumerate(todos, start=1):
            resp = client.post(
                url,
                json={"query": ADD_TODO, "variables": {"title": todo["title"]}},
            )
            resp.raise_for_status()
            body = resp.json()
            if body.get("errors"):
                raise RuntimeError(body["errors"][0]["message"])
            print(f"[{i}/{len(todos)}] Created: {body['data']['add']['id']} {todo['title']}")

    print(f"\nDone. {len(todos)} todos added.")


if __name__ == "__main__":
    main(*sys.argv[1:2])
