from krc2lrc.krc.markers import LINE_TIME_RE, strip_word_timing


def test_strip_word_timing_removes_all_markers():
    doc = "[0,500]<0,250,0>你<250,250,0>好\n[600,300]<0,300,0>World\n"
    assert strip_word_timing(doc) == "[0,500]你好\n[600,300]World\n"


def test_strip_word_timing_is_idempotent():
    doc = "[0,500]<0,250,0>a<250,250,0>b\n[ti:x]\n"
    once = strip_word_timing(doc)
    assert strip_word_timing(once) == once


def test_strip_word_timing_keeps_other_text():
    doc = "[ti:<1,2>]\n[10,20]a < 1,2,3> b <1,2,x>\n"
    assert strip_word_timing(doc) == doc


def test_strip_word_timing_only_removes_marker_chars():
    doc = "[0,1]<12,345,6>ab<7,8,9>c"
    out = strip_word_timing(doc)
    assert out == "[0,1]abc"
    assert len(doc) - len(out) == len("<12,345,6>") + len("<7,8,9>")


def test_line_time_re_shape():
    m = LINE_TIME_RE.match("[61234,2000]text")
    assert m is not None
    assert m.groups() == ("61234", "2000")
    assert m.end() == len("[61234,2000]")
    assert LINE_TIME_RE.match("[ti:song]") is None
    assert LINE_TIME_RE.match("[1,2,3]x") is None
