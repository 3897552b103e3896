#!/usr/bin/env python3
"""
Async chat example using the groqapi SDK.

Demonstrates async/await usage with the async client.
"""

import asyncio

from groqapi import AsyncGroq

MODEL = "llama-3.3-70b-versatile"


async def main():
    async with AsyncGroq() as client:
        print("Async Chat Example")
        print("=" * 50)

        print("\n1. Async chat completion:")
        reply = await client.chat.text(MODEL, "What is Python?")
        print(f"Response: {reply}")

        print("\n2. Async streaming:")
        print("Question: Count to 5\n")
        print("Response: ", end="", flush=True)

        async for fragment in client.chat.text_stream(MODEL, "Count to 5"):
            print(fragment, end="", flush=True)

        print("\n")


if __name__ == "__main__":
    asyncio.run(main())
