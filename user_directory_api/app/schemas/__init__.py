"""
Pydantic schema definitions for API payloads.

``user`` holds the user record and its request bodies, ``response``
the envelopes every endpoint answers with.
"""
