"""Building blocks for a small online role-playing game server: geometry and
collision, network buffers, packet framing, asyncio sessions, game data tables
and a database connection pool."""

__version__ = "0.1.0"