# realmcore

Building blocks for a small online role-playing game server, in plain
Python with no third-party runtime dependencies.

## Modules

- `realmcore.geometry`: `Vector2` (addition, subtraction, `dot`,
  `abs_dot`, `cross`, `magnitude`, `normalized`) and the degree-based
  helpers `get_sin`, `get_cos`, `radian_to_degree` and `calculate_angle`.
  Angle conversions use 3.14 for pi, as the game world does.
- `realmcore.shapes`: `Circle` and `Rectangle` shapes; `Rectangle.vertices(rot)`
  gives the two half-extent axes rotated by `rot` degrees.
- `realmcore.collider`: `Collider`, a shape with a position and a rotation.
  `Collider.circle(radius)` and `Collider.rectangle(width, height)` build one;
  `is_trigger(other)` tells whether two colliders overlap (circle–circle,
  circle–rectangle, and a separating-axis test for two rectangles).
- `realmcore.rwlock`: `ReadWriteLock` with `acquire_read`/`release_read`,
  `acquire_write`/`release_write` and the `read_locked()` and
  `write_locked()` context managers. Releasing a lock that is not held raises
  `LockError`.
- `realmcore.recv_buffer`: `RecvBuffer`, a byte buffer of ten times the
  given size with read and write cursors (`on_write`, `on_read`, `clean`,
  `read_view`, `write_view`). Moving a cursor too far raises `ValueError`.
- `realmcore.send_buffer`: `SendBufferManager` hands out `SendBuffer`s carved
  from 40960-byte `SendBufferChunk`s and takes chunks back into its pool.
- `realmcore.packet`: the 4-byte little-endian `PacketHeader` (packet id and
  total size including the header) with `pack`/`unpack`, and
  `check_packet_header`, `parse_packet`, `make_header_packet` and
  `make_packet`. Errors raise `PacketError`.
- `realmcore.threads`: `ThreadManager` starts worker threads, each with its
  own id (`current_thread_id()`) and send buffer pool
  (`current_send_buffer_manager()`); `Task` wraps a callable to run later.
- `realmcore.items`: equipment and miscellaneous item catalogues
  (`GameEquipItem`, `GameEtcItem`); unknown codes give a placeholder item.
- `realmcore.drops`: `GameDrop`, per-monster drop lists, equipment drops and
  gold.
- `realmcore.maps`: `Rect`, `MapInfo` (`in_rect`, `clamp`) and `GameMapInfo`
  with an optional monster area.
- `realmcore.quest`: `GameRoomQuest` and `GameRoomQuestInfo`, a kill counter
  where kills count once committed.
- `realmcore.gamedata`: `GameData` tables of player and monster `Character`s,
  `ExpLevel`s, items and drops, filled from a parsed JSON document with
  `load`, or from a file with `load_config(path)`. Missing or mistyped
  fields raise `ConfigError`.
- `realmcore.ticks`: `TickCounter`, a counter that wraps at a fixed period.
- `realmcore.player`: `DummyPlayer`, which spawns at a random point and takes
  one random step per `update_position()`, stopping at its `MapRange`.
- `realmcore.db`: `DBPool` of `DBConnection`s over any DB-API connection
  factory, and `ParamBinder` for collecting positional parameters and column
  names. Failures raise `DBError`.
- `realmcore.session` and `realmcore.service`: asyncio TCP `Session` and
  `Service`. A service listens with `start()`, opens outgoing sessions with
  `connect()`, tracks its sessions and `broadcast`s packets to the connected
  ones. Subclass `Session` and override `on_recv` to consume incoming bytes.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from realmcore.collider import Collider

hero = Collider.circle(20.0)
wall = Collider.rectangle(100.0, 40.0)
hero.set_position(60.0, 0.0)
print(hero.is_trigger(wall))  # True: the circle reaches the rectangle
```

```python
from realmcore.packet import PacketHeader, make_packet
from realmcore.send_buffer import SendBufferManager

manager = SendBufferManager(initial_chunks=1)
packet = make_packet(b"hello", 7, manager)
print(packet.data())                    # b'\x07\x00\t\x00hello'
print(PacketHeader.unpack(packet.data()))  # PacketHeader(id=7, size=9)
```

```python
from realmcore.gamedata import load_config

data = load_config("config.json")
print(data.monsters, data.drops.monster_gold(1))
```

```python
import sqlite3
from realmcore.db import DBPool

pool = DBPool()
pool.init(lambda: sqlite3.connect(":memory:"), size=2)
with pool.connection() as conn:
    conn.exec_direct("SELECT ? + ?", (1, 2))
    print(conn.fetch())  # (3,)
pool.close()
```

## What is not included

- There is no command and no ready-to-run game server; `Service` and
  `Session` are classes to build one on.
- Packets carry opaque byte payloads. No message types or serialization
  schema for game messages are defined; `parse_packet` takes the parser
  as an argument.
- Game rooms, monster behaviour, inventories, friends and mail are not here.
- `GameData` loads players, monsters, levels, items and drops only; other
  sections of a configuration file, such as maps, weapons or skills, are
  ignored.
- `realmcore.db` brings no database driver or schema; it pools whatever
  DB-API connections the given factory returns.