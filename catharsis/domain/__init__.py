"""Domain layer (pure logic).

- Keep the daily word and streak rules here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI.
- Dates come in as arguments; nothing here reads the clock.
"""
