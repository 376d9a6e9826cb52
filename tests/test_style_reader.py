import pytest

from kmlkit.errors import InvalidColorModeError, InvalidUnitsError, NumParseError
from kmlkit.link import Link, LinkTypeIcon, RefreshMode, ViewRefreshMode
from kmlkit.style import (
    BalloonStyle,
    ColorMode,
    Icon,
    IconStyle,
    LineStyle,
    ListStyle,
    Pair,
    PolyStyle,
    StyleMap,
    Units,
    Vec2,
)
from kmlkit.style_reader import (
    read_balloon_style,
    read_icon_style,
    read_label_style,
    read_line_style,
    read_link,
    read_link_type_icon,
    read_list_style,
    read_pair,
    read_poly_style,
    read_style,
    read_style_map,
)
from kmlkit.xmlevents import EventKind, EventReader


def _run(reader, text):
    events = EventReader(text)
    start = events.next_event()
    assert start.kind is EventKind.START
    return reader(events, start.attrs)


def test_parse_style_map():
    text = """
        <StyleMap id="id" test="test">
        </StyleMap>
        """
    assert _run(read_style_map, text) == StyleMap(id="id", attrs={"test": "test"})


def test_style_map_with_pairs():
    text = (
        "<StyleMap><Pair><key>normal</key><styleUrl>#a</styleUrl></Pair>"
        "<Pair><key>highlight</key><styleUrl>#b</styleUrl></Pair></StyleMap>"
    )
    result = _run(read_style_map, text)
    assert result.pairs == [
        Pair(key="normal", style_url="#a"),
        Pair(key="highlight", style_url="#b"),
    ]


def test_read_pair():
    text = '<Pair id="p"><!-- c --><key>normal</key><styleUrl>#x</styleUrl></Pair>'
    assert _run(read_pair, text) == Pair(key="normal", style_url="#x", attrs={"id": "p"})


def test_read_link():
    text = """<Link id="Some ID">
            <!-- comment -->
            <href>/path/to/local/resource</href>
            <refreshMode>onChange</refreshMode>
            <refreshInterval>4</refreshInterval>
            <viewRefreshMode>onStop</viewRefreshMode>
            <viewRefreshTime>4</viewRefreshTime>
            <viewBoundScale>1</viewBoundScale>
            <viewFormat></viewFormat>
        </Link>"""
    assert _run(read_link, text) == Link(
        href="/path/to/local/resource",
        refresh_mode=RefreshMode.ON_CHANGE,
        view_refresh_mode=ViewRefreshMode.ON_STOP,
        view_format="",
        attrs={"id": "Some ID"},
    )


def test_read_link_type_icon():
    text = """<Icon id="Some ID">
            <!-- comment -->
            <href>/path/to/local/resource</href>
            <refreshMode>onChange</refreshMode>
            <refreshInterval>4</refreshInterval>
            <viewRefreshMode>onStop</viewRefreshMode>
            <viewRefreshTime>4</viewRefreshTime>
            <viewBoundScale>1</viewBoundScale>
            <viewFormat></viewFormat>
        </Icon>"""
    assert _run(read_link_type_icon, text) == LinkTypeIcon(
        href="/path/to/local/resource",
        refresh_mode=RefreshMode.ON_CHANGE,
        view_refresh_mode=ViewRefreshMode.ON_STOP,
        view_format="",
        attrs={"id": "Some ID"},
    )


def test_read_link_numbers_and_query():
    text = (
        "<Link><refreshInterval>2.5</refreshInterval>"
        "<httpQuery>a=b</httpQuery></Link>"
    )
    link = _run(read_link, text)
    assert link.refresh_interval == 2.5
    assert link.http_query == "a=b"
    assert link.view_bound_scale == 1.0


def test_balloon_style_hide():
    text = (
        '<BalloonStyle id="b" k="v"><bgColor>ff00ff00</bgColor>'
        "<text>Hello</text><displayMode>hide</displayMode></BalloonStyle>"
    )
    assert _run(read_balloon_style, text) == BalloonStyle(
        id="b", bg_color="ff00ff00", text="Hello", display=False, attrs={"k": "v"}
    )


def test_icon_style_with_hot_spot_and_icon():
    text = (
        '<IconStyle id="i"><scale>1.5</scale><heading>90</heading>'
        '<hotSpot x="0.5" y="1" xunits="fraction" yunits="pixels"></hotSpot>'
        "<color>ff0000ff</color><colorMode>random</colorMode>"
        "<Icon><href>icon.png</href></Icon></IconStyle>"
    )
    assert _run(read_icon_style, text) == IconStyle(
        id="i",
        scale=1.5,
        heading=90.0,
        hot_spot=Vec2(x=0.5, y=1.0, xunits=Units.FRACTION, yunits=Units.PIXELS),
        icon=Icon(href="icon.png"),
        color="ff0000ff",
        color_mode=ColorMode.RANDOM,
    )


def test_icon_style_bad_hot_spot_number():
    text = '<IconStyle><hotSpot x="abc" y="1"></hotSpot></IconStyle>'
    with pytest.raises(NumParseError):
        _run(read_icon_style, text)


def test_icon_style_bad_units():
    text = '<IconStyle><hotSpot x="1" y="1" xunits="miles"></hotSpot></IconStyle>'
    with pytest.raises(InvalidUnitsError):
        _run(read_icon_style, text)


def test_label_style_values():
    text = "<LabelStyle><color>ff112233</color><scale>2</scale></LabelStyle>"
    label = _run(read_label_style, text)
    assert (label.color, label.scale, label.id) == ("ff112233", 2.0, None)


def test_line_style_invalid_color_mode():
    text = "<LineStyle><colorMode>bright</colorMode></LineStyle>"
    with pytest.raises(InvalidColorModeError):
        _run(read_line_style, text)


def test_line_style_width():
    text = '<LineStyle id="l"><width>3</width></LineStyle>'
    assert _run(read_line_style, text) == LineStyle(id="l", width=3.0)


@pytest.mark.parametrize(
    ("fill", "outline", "expected"),
    [("0", "false", (False, False)), ("1", "true", (True, True)), ("no", "0", (True, False))],
)
def test_poly_style_flags(fill, outline, expected):
    text = f"<PolyStyle><fill>{fill}</fill><outline>{outline}</outline></PolyStyle>"
    poly = _run(read_poly_style, text)
    assert (poly.fill, poly.outline) == expected


def test_poly_style_defaults():
    assert _run(read_poly_style, "<PolyStyle></PolyStyle>") == PolyStyle()


def test_list_style():
    text = "<ListStyle><bgColor>00000000</bgColor><maxSnippetLines>5</maxSnippetLines></ListStyle>"
    assert _run(read_list_style, text) == ListStyle(bg_color="00000000", max_snippet_lines=5)


@pytest.mark.parametrize("value", ["abc", "-1", "4294967296", "1.5"])
def test_list_style_bad_snippet_lines(value):
    text = f"<ListStyle><maxSnippetLines>{value}</maxSnippetLines></ListStyle>"
    with pytest.raises(NumParseError):
        _run(read_list_style, text)


def test_read_style_with_sub_styles():
    text = (
        '<Style id="s" extra="x"><LineStyle><width>2</width></LineStyle>'
        "<PolyStyle><fill>0</fill></PolyStyle></Style>"
    )
    style = _run(read_style, text)
    assert style.id == "s"
    assert style.attrs == {"extra": "x"}
    assert style.line == LineStyle(width=2.0)
    assert style.poly == PolyStyle(fill=False)
    assert style.icon is None