from chunkstego.framing.crc import chunk_crc, crc32


def test_crc32_known_value():
    payload = b"hello"
    assert crc32(payload) == 0x3610A686


def test_chunk_crc_covers_type_and_data():
    data = b"This is where your secret message will be!"
    assert chunk_crc(b"RuSt", data) == 2882656334
    assert chunk_crc(b"RuSt", data) == crc32(b"RuSt" + data)


def test_chunk_crc_detects_type_change():
    assert chunk_crc(b"RuSt", b"data") != chunk_crc(b"RuST", b"data")


def test_crc32_is_unsigned():
    assert 0 <= crc32(b"\xff" * 64) <= 0xFFFFFFFF
