"""
Tests for core.codec.

Tests cover:
- Decoding the device's indexed Key<N>=Value list body
- Sparse and out-of-order slot indices
- Malformed bodies raising MalformedResponse
- Encoding fixtures back into the device format
"""

import pytest

from core.codec import decode, encode
from core.entities import PlateRecord
from core.errors import MalformedResponse


class TestDecode:
    """Tests for decode."""

    def test_single_record(self):
        """A full Number/Begin/End/Notify block decodes to one record at its slot."""
        raw = "Number111=X111XX777\nBegin111=2023-11-02\nEnd111=2023-11-02\nNotify111=on"

        assert decode(raw) == [
            (111, PlateRecord(plate_number="X111XX777", valid_from="2023-11-02", valid_until="2023-11-02")),
        ]

    def test_trailing_newline_and_empty_body(self):
        """Lines without exactly one '=' are skipped."""
        assert decode("") == []
        assert decode("\n\n") == []
        assert decode("Number1=A001AA77\nBegin1=2023-01-01\nEnd1=2023-01-02\n") == [
            (1, PlateRecord("A001AA77", "2023-01-01", "2023-01-02")),
        ]

    def test_crlf_line_endings(self):
        raw = "Number4=B004BB99\r\nBegin4=2024-02-01\r\nEnd4=2024-02-29\r\n"

        assert decode(raw) == [(4, PlateRecord("B004BB99", "2024-02-01", "2024-02-29"))]

    def test_sparse_out_of_order_slots(self):
        """Slots 507, 3 and 1000 in shuffled line order correlate by index."""
        raw = "\n".join(
            [
                "Number1000=C1000CC",
                "Number507=A507AA77",
                "End3=2023-03-31",
                "Number3=B003BB99",
                "Begin1000=2023-10-01",
                "Begin507=2023-05-01",
                "End1000=2023-10-31",
                "Notify507=off",
                "Begin3=2023-03-01",
                "End507=2023-05-31",
            ]
        )

        with pytest.raises(MalformedResponse):
            # End3 precedes Number3
            decode(raw)

        reordered = raw.replace("End3=2023-03-31\nNumber3=B003BB99", "Number3=B003BB99\nEnd3=2023-03-31")
        assert decode(reordered) == [
            (3, PlateRecord("B003BB99", "2023-03-01", "2023-03-31")),
            (507, PlateRecord("A507AA77", "2023-05-01", "2023-05-31")),
            (1000, PlateRecord("C1000CC", "2023-10-01", "2023-10-31")),
        ]

    def test_descending_slots(self):
        raw = (
            "Number9=P009PP\nBegin9=2023-09-01\nEnd9=2023-09-09\n"
            "Number2=P002PP\nBegin2=2023-02-01\nEnd2=2023-02-02\n"
        )

        assert [slot for slot, _ in decode(raw)] == [2, 9]

    def test_plate_digits_do_not_affect_slot(self):
        """The slot comes from the key only, never from the value."""
        raw = "Number5=777\nBegin5=2023-01-01\nEnd5=2023-01-01\n"

        assert decode(raw) == [(5, PlateRecord("777", "2023-01-01", "2023-01-01"))]

    def test_number_line_overwrites_slot(self):
        raw = "Number1=A001AA\nBegin1=2023-01-01\nNumber1=B001BB\nEnd1=2023-01-05\n"

        assert decode(raw) == [(1, PlateRecord("B001BB", "", "2023-01-05"))]

    def test_unknown_keys_are_ignored(self):
        raw = "Number1=A001AA\nNotify1=on\nFirmware=2.1.0\nBegin1=2023-01-01\nEnd1=2023-01-02\n"

        assert decode(raw) == [(1, PlateRecord("A001AA", "2023-01-01", "2023-01-02"))]

    def test_begin_without_number_is_malformed(self):
        """Begin<N> with no preceding Number<N> raises, not IndexError/KeyError."""
        with pytest.raises(MalformedResponse, match="slot 42"):
            decode("Begin42=2023-01-01\n")

    def test_end_without_number_is_malformed(self):
        with pytest.raises(MalformedResponse):
            decode("Number1=A001AA\nEnd2=2023-01-01\n")

    def test_key_without_slot_is_malformed(self):
        with pytest.raises(MalformedResponse, match="no slot index"):
            decode("Number=A001AA\n")


class TestEncode:
    """Tests for encode."""

    def test_encode_format(self):
        text = encode([(111, PlateRecord("X111XX777", "2023-11-02", "2023-11-02"))])

        assert text == (
            "Number111=X111XX777\n"
            "Begin111=2023-11-02\n"
            "End111=2023-11-02\n"
            "Notify111=off\n"
        )

    def test_decode_restores_mapping_in_any_order(self):
        """Records encoded from an unordered mapping decode sorted by slot."""
        records = {
            1000: PlateRecord("C1000CC", "2023-10-01", "2023-10-31"),
            3: PlateRecord("B003BB99", "2023-03-01", "2023-03-31"),
            507: PlateRecord("A507AA77", "2023-05-01", "2023-05-31"),
        }

        assert dict(decode(encode(records))) == records
        assert [slot for slot, _ in decode(encode(records))] == [3, 507, 1000]
