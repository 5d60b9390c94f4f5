"""Pure domain modules: route gate, route matcher, content and posts.

None of these import FastAPI, so they can be tested directly and shared
with the smoke runner.
"""
__all__ = ["gate", "matcher", "content", "posts"]
