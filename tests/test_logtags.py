from ddmapgen import logtags


def test_auth_tag():
    assert logtags.auth("Trying to authenticate...") == (
        "\x1b[38;5;11mAUTH\x1b[0m Trying to authenticate..."
    )


def test_recv_tag_wraps_and_resets_color():
    tagged = logtags.recv("hello")
    assert tagged.startswith("\x1b[38;5;12mRECV\x1b[38;5;8m ")
    assert tagged.endswith("hello\x1b[0m")


def test_gen_tag():
    assert logtags.gen("Finished map generation") == (
        "\x1b[38;5;146mGEN \x1b[0m Finished map generation"
    )


def test_tags_work_as_format_templates():
    assert logtags.gen("Generating %s") % "abc" == logtags.gen("Generating abc")
    assert logtags.recv("%s") % "line" == logtags.recv("line")