import json

import pandas as pd

from nlptour.shared.io_utils import bracket_join, safe_filename, write_summary, write_table


def test_safe_filename():
    assert safe_filename("Tokenization en_core_web_sm") == "Tokenization_en_core_web_sm"
    assert safe_filename("a/b\\c:d") == "a_b_c_d"
    assert safe_filename("...") == "untitled"
    assert len(safe_filename("x" * 300)) == 180


def test_bracket_join():
    assert bracket_join(["Cats", "like", "milk"]) == "[Cats, like, milk]"
    assert bracket_join([]) == "[]"
    assert bracket_join(x for x in (1, 2)) == "[1, 2]"


def test_write_table_and_summary(tmp_path):
    outdir = tmp_path / "nested" / "out"
    df = pd.DataFrame({"token": ["Hi"], "stem": ["hi"]})

    path = write_table(df, outdir, "stem")
    assert path == outdir / "stem.csv"
    assert pd.read_csv(path).to_dict("records") == [{"token": "Hi", "stem": "hi"}]

    spath = write_summary({"routines": ["stem"], "dir": outdir}, outdir)
    data = json.loads(spath.read_text(encoding="utf-8"))
    assert data["routines"] == ["stem"]
    assert data["dir"] == str(outdir)
