from pleadgrid.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "layout": {"line_count": 28, "margins": {"top": 54}},
        "list": [1, 2],
    }
    override = {
        "layout": {"margins": {"top": 72}},
        "list": [3],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {"layout": {"line_count": 28, "margins": {"top": 72}}, "list": [3]}
    # ensure original not mutated
    assert base["list"] == [1, 2]
    assert base["layout"]["margins"] == {"top": 54}
