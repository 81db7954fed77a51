# verimeta

Building blocks for keeping and checking file checksum databases. It has no
dependencies outside the standard library.

## Modules

- `verimeta.pathstr`: path handling on plain strings with `/` separators:
  `basic_name`, `parent_folder`, `relative_path`, `shorten_path`,
  `join_path`, `compose_file_path`, `root`, `suffix`, `set_suffix`,
  `suffix_size`, `is_root`, `has_extension` (one extension or a list),
  `is_separator` and `join_strings`.
- `verimeta.tools`: the `Algorithm` enum (`MD5`, `SHA1`, `SHA256`, `SHA512`,
  and `NONE` for unknown), checksum helpers (`algo_str_len`,
  `algo_by_str_len`, `str_to_algo`, `can_be_checksum`, `is_hex_char`),
  file classification (`is_db_file`, `is_digest_file`, `digest_file_path`),
  date strings in the `yyyy/MM/dd HH:mm` form (`current_date_time`,
  `is_later`) and text formatting (`num_string`, `millisec_to_readable`,
  `data_size_readable`, `data_size_readable_ext`, `shorten_string`,
  `simplified_chars`, `compose_db_file_name`, `algo_to_str`,
  `files_number`, `files_num_size`, `file_name_and_size`, `colored_text`).
- `verimeta.treeitem`: `TreeItem`, a tree node holding one value per column
  and an ordered list of children.
- `verimeta.verdatetime`: `VerDateTime`, the created, updated and verified
  timestamps of a database, and `current_dt` to produce a fresh one.
- `verimeta.verjson`: `VerJson`, which reads and writes checksum databases.
- `verimeta.shacalculator`: `ShaCalculator`, which hashes files in chunks,
  reports each chunk and can be cancelled.
- `verimeta.settings`: `Settings`, user preferences saved to and loaded from
  an INI file.

## Installation

```
pip install .
```

## Examples

Formatting:

```python
from verimeta.tools import (
    compose_db_file_name, data_size_readable, millisec_to_readable, num_string,
)

data_size_readable(6532974324)     # "6.08GiB"
data_size_readable(512)            # "512 bytes"
num_string(1234567890)             # "1,234,567,890"
millisec_to_readable(83000)        # "1 min 23 sec"
compose_db_file_name("checksums", "/home/user/My Photos", "ver.json")
                                   # "checksums_My_Photos.ver.json"
```

Hashing a file and storing the result:

```python
from verimeta.tools import Algorithm
from verimeta.shacalculator import ShaCalculator
from verimeta.verjson import VerJson

calc = ShaCalculator(on_chunk=lambda size: print("read", size, "bytes"))
digest = calc.calculate("photo.jpg", Algorithm.SHA256)

db = VerJson("checksums_photos.ver.json")
db.add_item("photo.jpg", digest)
db.save()

loaded = VerJson()
loaded.set_file("checksums_photos.ver.json")
loaded.algorithm()                 # Algorithm.SHA256
```

`ShaCalculator.calculate` returns the hex digest, or `None` when the
`is_canceled` callable given to the constructor returned true before the
file was read to the end. The read size is 1 MiB by default (`chunk_size`).

Timestamps:

```python
from verimeta.verdatetime import DT, VerDateTime

dt = VerDateTime("Created: 2024/09/24 18:35")
dt.basic_date()                    # "2024/09/24 18:35"
dt.to_string(False)                # "Created: 2024/09/24 18:35"
dt.update(DT.VERIFIED)             # sets "Verified: <now>"
```

Setting `DT.CREATED` clears the updated and verified values; setting
`DT.UPDATED` clears the verified one.

## Database format

A database is a JSON array: a header object, an object mapping file paths
to checksums and, when there are any, an object
`{"Unreadable files": [...]}`. On saving, the header gets `App/Origin`,
`Total Checksums` and, if missing, `Hash Algorithm`. A file with the
`.ver` extension is written as a zip archive holding one entry,
`checksums.ver.json`; any other name is written as plain JSON. Loading
accepts both forms.

`VerJson.load` and `set_file` raise `FileNotFoundError` for a missing file
and `ValueError` for a file that is not a valid database; `save` raises
`ValueError` when there is no data or no file path.

## Settings

`Settings.save_settings(path)` and `Settings.load_settings(path)` write and
read an INI file; without a path they use `default_settings_path()`, a file
under `$XDG_CONFIG_HOME` (or `~/.config`). Values missing from the file take
their defaults. `add_recent_file` keeps at most 15 entries, newest first.
`set_algorithm` calls every function in `algorithm_changed` when the
algorithm changes. The last browsed path (`last_fs_path`) is stored and
restored only when it is not `None`.

## What this package does not do

It provides no command-line tool and no graphical interface. It does not
walk folders to build a database, compare files against stored checksums,
track per-status file counts or show progress: it supplies the pieces
(path helpers, hashing, the database file and settings) that such a tool
would be built from.

## Running the tests

```
pip install .[test]
pytest
```