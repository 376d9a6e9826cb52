from kmlkit.style import (
    BalloonStyle,
    ColorMode,
    Icon,
    IconStyle,
    LabelStyle,
    LineStyle,
    ListStyle,
    Pair,
    PolyStyle,
    Style,
    StyleMap,
    Units,
    Vec2,
)
from kmlkit.style_writer import (
    write_balloon_style,
    write_icon,
    write_icon_style,
    write_label_style,
    write_line_style,
    write_list_style,
    write_pair,
    write_poly_style,
    write_style,
    write_style_map,
)
from kmlkit.xmlwriter import XmlBuilder


def _render(writer, value):
    out = XmlBuilder()
    writer(out, value)
    return out.getvalue()


def test_write_style_map():
    style_map = StyleMap(id="id", attrs={"test": "test"})
    assert _render(write_style_map, style_map) == '<StyleMap id="id" test="test"></StyleMap>'


def test_write_style_map_with_pairs():
    style_map = StyleMap(
        pairs=[Pair(key="normal", style_url="#a"), Pair(key="highlight", style_url="#b")]
    )
    assert _render(write_style_map, style_map) == (
        "<StyleMap>"
        "<Pair><key>normal</key><styleUrl>#a</styleUrl></Pair>"
        "<Pair><key>highlight</key><styleUrl>#b</styleUrl></Pair>"
        "</StyleMap>"
    )


def test_write_pair_escapes_text():
    assert _render(write_pair, Pair(key="a&b", style_url="#x")) == (
        "<Pair><key>a&amp;b</key><styleUrl>#x</styleUrl></Pair>"
    )


def test_write_balloon_style_default():
    assert _render(write_balloon_style, BalloonStyle()) == (
        "<BalloonStyle><textColor>ffffffff</textColor></BalloonStyle>"
    )


def test_write_balloon_style_hidden():
    balloon = BalloonStyle(id="b", bg_color="ff000000", text="hi", display=False)
    assert _render(write_balloon_style, balloon) == (
        '<BalloonStyle id="b"><bgColor>ff000000</bgColor>'
        "<textColor>ffffffff</textColor><text>hi</text>"
        "<displayMode>hide</displayMode></BalloonStyle>"
    )


def test_write_icon():
    assert _render(write_icon, Icon(href="icon.png", attrs={"id": "i"})) == (
        "<Icon><href>icon.png</href></Icon>"
    )


def test_write_icon_style_default():
    assert _render(write_icon_style, IconStyle()) == (
        "<IconStyle><scale>1</scale><heading>0</heading>"
        "<color>ffffffff</color><colorMode>normal</colorMode>"
        "<Icon><href></href></Icon></IconStyle>"
    )


def test_write_icon_style_hot_spot():
    icon_style = IconStyle(
        id="s",
        scale=1.5,
        hot_spot=Vec2(x=0.5, y=1.0, xunits=Units.FRACTION, yunits=Units.PIXELS),
        color_mode=ColorMode.RANDOM,
        icon=Icon(href="pin.png"),
    )
    assert _render(write_icon_style, icon_style) == (
        '<IconStyle id="s"><scale>1.5</scale><heading>0</heading>'
        '<hotSpot x="0.5" y="1" xunits="fraction" yunits="pixels"></hotSpot>'
        "<color>ffffffff</color><colorMode>random</colorMode>"
        "<Icon><href>pin.png</href></Icon></IconStyle>"
    )


def test_write_label_style():
    label = LabelStyle(color="ff00ff00", scale=0.8)
    assert _render(write_label_style, label) == (
        "<LabelStyle><color>ff00ff00</color><colorMode>normal</colorMode>"
        "<scale>0.8</scale></LabelStyle>"
    )


def test_write_line_style():
    line = LineStyle(id="l", width=2.0)
    assert _render(write_line_style, line) == (
        '<LineStyle id="l"><color>ffffffff</color><colorMode>normal</colorMode>'
        "<width>2</width></LineStyle>"
    )


def test_write_poly_style():
    poly = PolyStyle(fill=False)
    assert _render(write_poly_style, poly) == (
        "<PolyStyle><color>ffffffff</color><colorMode>normal</colorMode>"
        "<fill>false</fill><outline>true</outline></PolyStyle>"
    )


def test_write_list_style():
    list_style = ListStyle(max_snippet_lines=5)
    assert _render(write_list_style, list_style) == (
        "<ListStyle><bgColor>ffffffff</bgColor>"
        "<maxSnippetLines>5</maxSnippetLines></ListStyle>"
    )


def test_write_style_with_sub_styles():
    style = Style(
        id="st",
        attrs={"extra": "1"},
        line=LineStyle(),
        poly=PolyStyle(),
    )
    assert _render(write_style, style) == (
        '<Style id="st" extra="1">'
        "<LineStyle><color>ffffffff</color><colorMode>normal</colorMode>"
        "<width>1</width></LineStyle>"
        "<PolyStyle><color>ffffffff</color><colorMode>normal</colorMode>"
        "<fill>true</fill><outline>true</outline></PolyStyle>"
        "</Style>"
    )


def test_write_empty_style():
    assert _render(write_style, Style()) == "<Style></Style>"