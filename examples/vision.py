#!/usr/bin/env python3
"""
Vision example using the groqapi SDK.

Usage: python vision.py [path/to/local/image.jpg]
"""

import sys

from groqapi import Groq, extract_content_from_completion

IMAGE_URL = (
    "https://upload.wikimedia.org/wikipedia/commons/thumb/4/4d/"
    "Cat_November_2010-1a.jpg/800px-Cat_November_2010-1a.jpg"
)


def main():
    with Groq() as client:
        if len(sys.argv) > 1:
            response = client.vision.create_with_base64_image(
                sys.argv[1], "Describe what you see in this image."
            )
        else:
            response = client.vision.create_with_image_url(
                IMAGE_URL, "Describe what you see in this image."
            )

        print(f"Image description: {extract_content_from_completion(response)}")


if __name__ == "__main__":
    main()
