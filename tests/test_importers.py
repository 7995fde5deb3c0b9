from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

from writealizer.config import WriteAlizerConfig
from writealizer.data import (
    SchemaError,
    import_coh,
    import_gamet,
    import_merge_gamet_rb,
    import_rb,
    merge_rb_gamet,
    sample_path,
)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


GAMET_TEXT = (
    "filename,error_count,word_count,grammar,misspelling,whitespace\n"
    "essays\\s3.txt,4,120,1,3,0\n"
    "essays\\s1.txt,6,150,2,4,0\n"
    "essays\\s2.txt,NaN,90,0,2,0\n"
)


def test_import_gamet_selects_columns_and_adds_rates(tmp_path):
    frame = import_gamet(_write(tmp_path, "gamet.csv", GAMET_TEXT))

    assert list(frame.columns) == [
        "ID",
        "error_count",
        "word_count",
        "grammar",
        "misspelling",
        "per_gram",
        "per_misspell",
    ]
    assert frame["ID"].tolist() == ["s1", "s2", "s3"]
    assert frame.loc[0, "per_gram"] == pytest.approx(0.013333)
    assert frame.loc[0, "per_misspell"] == pytest.approx(0.026667)
    assert frame.loc[2, "per_gram"] == pytest.approx(0.008333)
    assert pd.isna(frame.loc[1, "error_count"])


def test_import_gamet_rejects_zero_word_count(tmp_path):
    text = "filename,error_count,word_count,grammar,misspelling\nessays\\s1.txt,0,0,0,0\n"

    with pytest.raises(SchemaError, match="word_count is zero"):
        import_gamet(_write(tmp_path, "gamet.csv", text))


def test_import_gamet_requires_filename_column(tmp_path):
    text = "name,error_count,word_count,grammar,misspelling\ns1,1,10,0,1\n"

    with pytest.raises(SchemaError, match="filename"):
        import_gamet(_write(tmp_path, "gamet.csv", text))


def test_import_gamet_rejects_non_numeric_counts(tmp_path):
    text = "filename,error_count,word_count,grammar,misspelling\nessays\\s1.txt,1,ten,0,1\n"

    with pytest.raises(SchemaError, match="word_count"):
        import_gamet(_write(tmp_path, "gamet.csv", text))


def test_import_gamet_rejects_duplicate_ids(tmp_path):
    text = (
        "filename,error_count,word_count,grammar,misspelling\n"
        "a\\s1.txt,1,10,0,1\n"
        "b\\s1.txt,1,12,0,1\n"
    )

    with pytest.raises(SchemaError, match="duplicate IDs"):
        import_gamet(_write(tmp_path, "gamet.csv", text))


def test_import_gamet_uses_configured_identifier_rule(tmp_path):
    config = WriteAlizerConfig()
    config.identifier.segment = 1
    text = "filename,error_count,word_count,grammar,misspelling\nC:\\data\\s1.txt,1,10,0,1\n"

    frame = import_gamet(_write(tmp_path, "gamet.csv", text), config=config)

    assert frame["ID"].tolist() == ["data"]


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(FileNotFoundError):
        import_gamet(tmp_path / "absent.csv")
    with pytest.raises(FileNotFoundError):
        import_rb(tmp_path / "absent.csv")


def test_import_coh_keeps_all_columns(tmp_path):
    text = (
        "TextID,filename,DESWC,SYNNP\n"
        "s2.txt,essays\\s2.txt,97,0.7\n"
        "s1.txt,essays\\s1.txt,152,NaN\n"
    )

    frame = import_coh(_write(tmp_path, "coh.csv", text))

    assert frame["ID"].tolist() == ["s1", "s2"]
    assert set(frame.columns) == {"TextID", "filename", "DESWC", "SYNNP", "ID"}
    # Label columns become codes of their sorted values.
    assert frame["filename"].tolist() == [1.0, 2.0]
    assert pd.isna(frame.loc[0, "SYNNP"])
    assert frame.drop(columns=["ID"]).dtypes.map(pd.api.types.is_numeric_dtype).all()


def test_import_coh_codes_other_text_columns(tmp_path):
    text = (
        "filename,Title,DESWC\n"
        "essays\\s2.txt,Winter,97\n"
        "essays\\s1.txt,Autumn,152\n"
        "essays\\s3.txt,NaN,118\n"
    )

    frame = import_coh(_write(tmp_path, "coh.csv", text))

    assert frame["ID"].tolist() == ["s1", "s2", "s3"]
    assert frame["Title"].tolist()[:2] == [1.0, 2.0]
    assert pd.isna(frame.loc[2, "Title"])
    assert frame["DESWC"].tolist() == [152, 97, 118]


RB_BODY = (
    "File name,AvgSentUnq,AvgWordsList_neg,AvgWordsList_pos,WdEntr\n"
    "s3,14.1,0.02,0.11,6.1\n"
    "s1,16.9,0.03,0.12,NaN\n"
    "s2,13.8,0.01,0.09,5.7\n"
)


@pytest.mark.parametrize("prefix", ["SEP=,\n", "SEP=,\r\n", "\ufeffSEP=,\n", ""])
def test_import_rb_handles_separator_line(tmp_path, prefix):
    frame = import_rb(_write(tmp_path, "rb.csv", prefix + RB_BODY))

    assert list(frame.columns) == ["ID", "AvgSentUnq", "WdEntr"]
    assert frame["ID"].tolist() == ["s1", "s2", "s3"]
    assert pd.isna(frame.loc[0, "WdEntr"])


def test_import_rb_keeps_numeric_looking_ids_as_text(tmp_path):
    text = "File name,WdEntr\n10,1.0\n2,2.0\n"

    frame = import_rb(_write(tmp_path, "rb.csv", text))

    assert frame["ID"].tolist() == ["10", "2"]


def test_leading_zero_ids_join_across_readerbench_and_gamet(tmp_path):
    rb_path = _write(tmp_path, "rb.csv", "File name,WdEntr\n002,2.0\n001,1.0\n")
    gamet_path = _write(
        tmp_path,
        "gamet.csv",
        "filename,error_count,word_count,grammar,misspelling\n"
        "essays\\001.txt,1,10,0,1\n"
        "essays\\002.txt,2,20,1,1\n",
    )

    assert import_rb(rb_path)["ID"].tolist() == ["001", "002"]
    merged = import_merge_gamet_rb(rb_path, gamet_path)

    assert merged["ID"].tolist() == ["001", "002"]
    assert merged["WdEntr"].tolist() == [1.0, 2.0]
    assert merged["word_count"].tolist() == [10, 20]


def test_import_rb_codes_text_columns(tmp_path):
    text = "File name,Lang,WdEntr\ns2,French,2.0\ns1,English,1.0\n"

    frame = import_rb(_write(tmp_path, "rb.csv", text))

    assert frame["ID"].tolist() == ["s1", "s2"]
    assert frame["Lang"].tolist() == [1.0, 2.0]
    assert frame["WdEntr"].tolist() == [1.0, 2.0]


def test_import_rb_requires_file_name_column(tmp_path):
    with pytest.raises(SchemaError, match="File name"):
        import_rb(_write(tmp_path, "rb.csv", "Name,WdEntr\ns1,1.0\n"))


def test_merge_keeps_only_shared_ids(caplog):
    rb = pd.DataFrame({"ID": ["1", "2", "3"], "WdEntr": [1.0, 2.0, 3.0]})
    gamet = pd.DataFrame({"ID": ["2", "3", "4"], "per_gram": [0.1, 0.2, 0.3]})

    with caplog.at_level(logging.WARNING, logger="writealizer.data.importers"):
        merged = merge_rb_gamet(rb, gamet)

    assert merged["ID"].tolist() == ["2", "3"]
    assert list(merged.columns) == ["ID", "WdEntr", "per_gram"]
    assert merged["per_gram"].tolist() == [0.1, 0.2]
    assert "1 ReaderBench-only and 1 GAMET-only" in caplog.text


def test_bundled_samples_import_and_merge():
    rb = import_rb(sample_path("sample_rb.csv"))
    coh = import_coh(sample_path("sample_coh.csv"))
    gamet = import_gamet(sample_path("sample_gamet.csv"))
    merged = import_merge_gamet_rb(sample_path("sample_rb.csv"), sample_path("sample_gamet.csv"))

    expected = ["s101", "s102", "s103", "s104"]
    assert rb["ID"].tolist() == expected
    assert coh["ID"].tolist() == expected
    assert gamet["ID"].tolist() == expected
    assert merged["ID"].tolist() == expected
    assert not any("AvgWordsList" in column for column in merged.columns)
    assert {"per_gram", "per_misspell", "WdEntr"} <= set(merged.columns)


def test_unknown_sample_name():
    with pytest.raises(FileNotFoundError):
        sample_path("sample_other.csv")
