#!/usr/bin/env python3
"""
Basic chat example using the groqapi SDK.

Demonstrates a simple chat completion and a multi-turn conversation.
"""

from groqapi import Groq, build_chat_request, extract_content_from_completion

MODEL = "llama-3.3-70b-versatile"


def main():
    # Reads GROQ_API_KEY from the environment
    with Groq() as client:
        print("Basic Chat Example")
        print("=" * 50)

        reply = client.chat.text(
            MODEL,
            "What are the three main programming paradigms?",
            system_message="You are a concise and direct assistant.",
        )
        print(f"Response: {reply}")

        # Multi-turn: resend the history you want the model to see
        request = build_chat_request(
            MODEL,
            [
                {"role": "system", "content": "You are a helpful assistant."},
                {"role": "user", "content": "Name a functional language."},
                {"role": "assistant", "content": "Haskell."},
                {"role": "user", "content": "And one that runs on the JVM?"},
            ],
        )
        response = client.chat.completions.create(request)
        print(f"\nFollow-up: {extract_content_from_completion(response)}")
        print(f"Tokens used: {response.get('usage', {}).get('total_tokens', 'N/A')}")


if __name__ == "__main__":
    main()
