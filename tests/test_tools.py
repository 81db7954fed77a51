from datetime import datetime

import pytest

from verimeta import tools
from verimeta.tools import Algorithm


@pytest.mark.parametrize(
    "algo, length",
    [
        (Algorithm.MD5, 32),
        (Algorithm.SHA1, 40),
        (Algorithm.SHA256, 64),
        (Algorithm.SHA512, 128),
        (Algorithm.NONE, 0),
    ],
)
def test_algo_str_len_and_back(algo, length):
    assert tools.algo_str_len(algo) == length
    assert tools.algo_by_str_len(length) == algo


def test_algo_by_unknown_length():
    assert tools.algo_by_str_len(33) == Algorithm.NONE


@pytest.mark.parametrize(
    "name, algo",
    [
        ("SHA-1", Algorithm.SHA1),
        ("sha256", Algorithm.SHA256),
        ("SHA-512", Algorithm.SHA512),
        ("MD5", Algorithm.MD5),
        ("crc", Algorithm.NONE),
    ],
)
def test_str_to_algo(name, algo):
    assert tools.str_to_algo(name) == algo


def test_str_to_algo_round_trip_with_algo_to_str():
    for algo in (Algorithm.MD5, Algorithm.SHA1, Algorithm.SHA256, Algorithm.SHA512):
        assert tools.str_to_algo(tools.algo_to_str(algo)) == algo
        assert tools.str_to_algo(tools.algo_to_str(algo, False)) == algo


def test_digits_to_num():
    assert tools.digits_to_num([0, 1, 2, 3]) == 123
    assert tools.digits_to_num([]) == 0


def test_can_be_checksum():
    assert tools.can_be_checksum("a" * 64)
    assert tools.can_be_checksum("0123456789ABCDEF" * 2)
    assert not tools.can_be_checksum("g" * 64)
    assert not tools.can_be_checksum("a" * 63)
    assert tools.can_be_checksum("f" * 40, Algorithm.SHA1)
    assert not tools.can_be_checksum("f" * 40, Algorithm.SHA256)


def test_is_hex_char():
    assert all(tools.is_hex_char(ch) for ch in "09afAF")
    assert not any(tools.is_hex_char(ch) for ch in "gG -é")


def test_is_later():
    assert tools.is_later("2024/09/24 18:35", "2024/09/25 11:40")
    assert not tools.is_later("2024/09/25 11:40", "2024/09/24 18:35")
    assert not tools.is_later("2024/09/24 18:35", "2024/09/24 18:35")
    assert not tools.is_later("2024/09/24", "2024/09/25 11:40")


def test_is_later_with_datetime():
    assert tools.is_later("2024/09/24 18:35", datetime(2024, 9, 25, 11, 40))
    assert not tools.is_later("", datetime(2024, 9, 25, 11, 40))


def test_flags():
    assert tools.is_flag_combined(0b110)
    assert not tools.is_flag_combined(0b100)
    assert tools.is_flag_non_combined(0b100)
    assert tools.is_flag_non_combined(0)
    assert not tools.is_flag_non_combined(0b101)


def test_join_strings():
    assert tools.join_strings("a/", "/b", "/") == "a/b"
    assert tools.join_strings("a", "b", "/") == "a/b"
    assert tools.join_strings("a", "b", " >> ") == "a >> b"
    assert tools.join_strings(5, "min") == "5 min"
    assert tools.join_strings("item", 7) == "item 7"


def test_digest_file_path():
    assert (
        tools.digest_file_path("../folder/file.txt", Algorithm.SHA256)
        == "../folder/file.txt.sha256"
    )
    assert tools.digest_file_path("file.txt", 40) == "file.txt.sha1"


def test_db_and_digest_files():
    assert tools.is_db_file("/a/checksums.ver.json")
    assert tools.is_db_file("/a/checksums.VER")
    assert not tools.is_db_file("/a/file.json")
    assert tools.is_digest_file("file.sha512")
    assert not tools.is_digest_file("file.txt")


def test_current_date_time_shape():
    text = tools.current_date_time()
    assert len(text) == tools.DT_STR_LEN
    assert datetime.strptime(text, tools.DT_FORMAT).strftime(tools.DT_FORMAT) == text


def test_num_string():
    assert tools.num_string(1234567890) == "1,234,567,890"
    assert tools.num_string(999) == "999"
    assert tools.num_string(1000).replace(",", "") == "1000"


def test_data_size_readable():
    assert tools.data_size_readable(1000) == "1000 bytes"
    assert tools.data_size_readable(1024) == "1.00KiB"
    assert tools.data_size_readable(5 * 1024**3).endswith("GiB")
    assert tools.data_size_readable(3 * 1024**4).endswith("TiB")


def test_data_size_readable_ext():
    size = 6532974324
    assert tools.data_size_readable_ext(size) == (
        f"{tools.data_size_readable(size)} ({tools.num_string(size)} bytes)"
    )


def test_shorten_string():
    text = "x" * 10 + "y" * 10
    assert tools.shorten_string(text, 30) == text
    short = tools.shorten_string(text, 5)
    assert short == text[:5] + "..."
    tail = tools.shorten_string(text, 5, False)
    assert tail == "..." + text[-5:]


def test_simplified_chars():
    result = tools.simplified_chars("a b::c")
    assert "__" not in result
    assert not any(ch in result for ch in " :")
    assert tools.simplified_chars("") == ""


def test_parentheses():
    assert tools.in_parentheses(3) == "(3)"
    assert tools.in_parentheses("x") == "(x)"
    assert tools.add_str_in_parentheses("a", "b") == "a (b)"


def test_compose_db_file_name():
    assert tools.compose_db_file_name("checksums", "", "ver.json") == "checksums.ver.json"
    assert (
        tools.compose_db_file_name("checksums", "/home/My Folder", "ver.json")
        == "checksums_My_Folder.ver.json"
    )


def test_algo_to_str():
    assert tools.algo_to_str(Algorithm.SHA256) == "SHA-256"
    assert tools.algo_to_str(Algorithm.MD5, False) == "md5"
    assert tools.algo_to_str(Algorithm.NONE) == "Unknown"
    assert tools.algo_to_str(128) == "SHA-512"


def test_files_number_and_size():
    assert tools.files_number(0) == "no files"
    assert tools.files_number(1) == "1 file"
    assert tools.files_number(3) == "3 files"
    assert tools.files_num_size(0, 500) == "no files"
    assert tools.files_num_size(2, 500) == "2 files (500 bytes)"


def test_file_name_and_size(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")
    assert tools.file_name_and_size(str(path)) == "data.bin (3 bytes)"
    assert tools.file_name_and_size("/x/y/name.txt", 10) == "name.txt (10 bytes)"


def test_colored_text():
    assert tools.colored_text(True) == "color : red"
    assert tools.colored_text(False) == "color : green"
    assert tools.colored_text(True, "QLabel") == "QLabel { color : red }"


def test_hashlib_name_for_unknown_raises():
    assert tools.algo_by_str_len(64).hashlib_name == "sha256"
    assert tools.str_to_algo("MD5").hashlib_name == "md5"
    with pytest.raises(ValueError):
        tools.algo_by_str_len(33).hashlib_name