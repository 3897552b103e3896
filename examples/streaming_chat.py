#!/usr/bin/env python3
"""
Streaming chat example using the groqapi SDK.

Demonstrates SSE streaming for real-time token generation.
"""

from groqapi import Groq


def main():
    with Groq() as client:
        print("Streaming Chat Example")
        print("=" * 50)
        print("Question: Explain briefly what machine learning is.\n")
        print("Response: ", end="", flush=True)

        for fragment in client.chat.text_stream(
            "llama-3.3-70b-versatile",
            "Explain briefly what machine learning is and give two examples of applications.",
            system_message="You are a helpful and informative assistant.",
        ):
            print(fragment, end="", flush=True)

        print("\n")


if __name__ == "__main__":
    main()
