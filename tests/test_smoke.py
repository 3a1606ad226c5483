import json

import pytest

from ncs_color_engine import find_nearest, snap_to_standard
from ncs_color_engine.demo import main, run


def test_smoke():
    (match,) = find_nearest("#FFFFFF")
    assert match.entry.code == "S 0000-N"
    snap = snap_to_standard("S 1051-Y91R")
    assert snap is not None and snap.distance > 0


def test_run_hex_and_code():
    out = run("#FFFFFF", top_k=2)
    assert out["mode"] == "nearest"
    assert len(out["matches"]) == 2
    assert out["matches"][0]["code"] == "S 0000-N"
    assert out["matches"][0]["confidence"] == "High"

    out = run("S 1050-Y90R")
    assert out["mode"] == "snap"
    assert out["matches"][0]["code"] == "S 1050-Y90R"
    assert out["matches"][0]["distance"] == 0.0


def test_main_prints_json(capsys):
    main(["#FFFFFF"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["matches"][0]["name"] == "White"


def test_main_no_match_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["garbage"])
    assert exc.value.code == 2
    assert "No catalog match" in capsys.readouterr().err
