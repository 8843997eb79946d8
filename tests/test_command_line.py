import pytest

from bucketkit.command_line import FlagSpec, command_flags, generate_command


class FakeURL:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


@pytest.mark.parametrize(
    "command, default_flags, set_flags, args, expected",
    [
        (
            "cp",
            None,
            {},
            ["s3://bucket/key1", "s3://bucket/key2"],
            'cp "s3://bucket/key1" "s3://bucket/key2"',
        ),
        (
            "cp",
            {"raw": True, "acl": "public-read"},
            {},
            ["s3://bucket/key1", "s3://bucket/key2"],
            'cp --acl=public-read --raw=true "s3://bucket/key1" "s3://bucket/key2"',
        ),
        (
            "cp",
            {"raw": True},
            {"raw": True},
            ["s3://bucket/key1", "s3://bucket/key2"],
            'cp --raw=true "s3://bucket/key1" "s3://bucket/key2"',
        ),
        (
            "cp",
            None,
            {
                "force-glacier-transfer": True,
                "raw": True,
                "flatten": True,
                "concurrency": 6,
                "delete": True,
                "size-only": True,
            },
            ["s3://bucket/key1", "s3://bucket/key2"],
            'cp --concurrency=6 --flatten=true --force-glacier-transfer=true --raw=true '
            '"s3://bucket/key1" "s3://bucket/key2"',
        ),
        (
            "cp",
            None,
            {"exclude": ["*.txt", "*.log"]},
            ["/source/dir", "s3://bucket/prefix/"],
            'cp --exclude=*.log --exclude=*.txt "/source/dir" "s3://bucket/prefix/"',
        ),
        (
            "rm",
            None,
            {},
            [
                "s3://bucket/key1",
                "s3://bucket/key2",
                "s3://bucket/prefix/key3",
                "s3://bucket/prefix/key4",
            ],
            'rm "s3://bucket/key1" "s3://bucket/key2" "s3://bucket/prefix/key3" "s3://bucket/prefix/key4"',
        ),
        (
            "rm",
            None,
            {},
            ["file with space", "wow wow"],
            'rm "file with space" "wow wow"',
        ),
    ],
    ids=[
        "empty-cli-flags",
        "empty-cli-flags-with-default-flags",
        "same-flag-ignored-if-default",
        "ignore-non-shared-flag",
        "string-slice-flag",
        "command-with-multiple-args",
        "command-args-with-spaces",
    ],
)
def test_generate_command(command, default_flags, set_flags, args, expected):
    assert generate_command(command, default_flags, set_flags, args) == expected


def test_generate_command_accepts_url_objects():
    urls = [FakeURL("s3://bucket/a"), FakeURL("s3://bucket/b")]
    assert generate_command("cp", {"raw": True}, {}, urls) == 'cp --raw=true "s3://bucket/a" "s3://bucket/b"'


def test_generate_command_resolves_aliases_to_primary_name():
    result = generate_command("cp", None, {"c": 3, "n": True}, ["a", "s3://b/"])
    assert result == 'cp --concurrency=3 --no-clobber=true "a" "s3://b/"'


def test_generate_command_formats_false_booleans():
    assert generate_command("cp", {"raw": False}, {}, []) == "cp --raw=false"


def test_generate_command_quotes_special_characters():
    assert generate_command("rm", None, {}, ['a"b\\c\n']) == 'rm "a\\"b\\\\c\\n"'


def test_generate_command_sync_keeps_delete_flag():
    assert generate_command("sync", None, {"delete": True}, ["d/", "s3://b/"]) == 'sync --delete=true "d/" "s3://b/"'


def test_generate_command_unknown_command():
    with pytest.raises(ValueError):
        generate_command("nope", None, {}, [])


def test_command_flags_mv_matches_cp():
    assert command_flags("mv") == command_flags("cp")


def test_command_flags_cp_defaults():
    specs = {spec.name: spec for spec in command_flags("cp")}
    assert specs["concurrency"].default == 5
    assert specs["part-size"].default == 50
    assert specs["concurrency"].names == ("concurrency", "c")
    assert "delete" not in specs


def test_command_flags_sync_has_sync_flags():
    names = [spec.name for spec in command_flags("sync")]
    assert names[:2] == ["delete", "size-only"]
    assert "flatten" not in names


def test_command_flags_unknown():
    with pytest.raises(ValueError):
        command_flags("unknown")


def test_flag_spec_format_values():
    assert FlagSpec("exclude", list).format_values("*.txt") == ["*.txt"]
    assert FlagSpec("exclude", list).format_values(["a", "b"]) == ["a", "b"]
    assert FlagSpec("raw", bool).format_values(True) == ["true"]
    assert FlagSpec("concurrency", int).format_values("7") == ["7"]