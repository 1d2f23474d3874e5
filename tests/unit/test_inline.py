from arxiv_md.converter.classify import InlineKind, classify_inline
from arxiv_md.converter.inline import render_inline


def test_citation_joins_reference_pointers(fragment):
    p = fragment(
        '<p class="ltx_p">See <cite class="ltx_cite ltx_citemacro_cite">[<a class="ltx_ref" href="#bib.bib12">12</a>, '
        '<a class="ltx_ref" href="#bib.bib7">7</a>]</cite>.</p>'
    )
    assert render_inline(p) == "See [12, 7]."


def test_citation_with_span_refs_from_arxiv_html(fragment):
    p = fragment('<p><cite class="ltx_cite"><span class="ltx_ref"> Smith et al. </span></cite></p>')
    assert render_inline(p) == "[Smith et al.]"


def test_empty_citation_renders_empty_brackets(fragment):
    p = fragment('<p>x <cite class="ltx_cite">(?)</cite></p>')
    assert render_inline(p) == "x []"


def test_math_uses_alttext(fragment):
    p = fragment('<p>Let <math alttext="x^{2}" display="inline"><semantics><mi>x</mi></semantics></math> hold.</p>')
    assert render_inline(p) == "Let $x^{2}$ hold."


def test_math_wrapper_span(fragment):
    p = fragment('<p><span class="ltx_Math"><math alttext="\\alpha"></math></span></p>')
    assert render_inline(p) == "$\\alpha$"


def test_math_without_alttext_degrades(fragment):
    p = fragment('<p>a<math><mi>x</mi></math>b<span class="ltx_Math">junk</span>c</p>')
    assert render_inline(p) == "a$$bc"


def test_cross_reference_keeps_href(fragment):
    p = fragment(
        '<p><a class="ltx_ref" href="#S2">Section 2</a> and '
        '<a class="ltx_ref ltx_href" href="https://example.org/x">code</a> and '
        '<span class="ltx_ref">Table 1</span></p>'
    )
    assert render_inline(p) == "[Section 2](#S2) and [code](https://example.org/x) and [Table 1]()"


def test_footnote_is_abbreviated(fragment):
    note = "n" * 80
    p = fragment(f'<p>Text<span class="ltx_note ltx_role_footnote">  {note}  </span>.</p>')
    assert render_inline(p) == f"Text [^{'n' * 50}]."


def test_blank_footnote_is_dropped(fragment):
    p = fragment('<p>Text<span class="ltx_note"> </span></p>')
    assert render_inline(p) == "Text"


def test_emphasis_nests(fragment):
    p = fragment('<p><span class="ltx_text ltx_font_bold">bold <em>it</em></span> <strong>s</strong> <i>i</i></p>')
    assert render_inline(p) == "**bold *it*** **s** *i*"


def test_code_is_not_rendered_recursively(fragment):
    p = fragment("<p><code>a <b>b</b></code></p>")
    assert render_inline(p) == "`a b`"


def test_link_and_line_break(fragment):
    p = fragment('<p>go <a href="https://arxiv.org">here</a><br/>next</p>')
    assert render_inline(p) == "go [here](https://arxiv.org)\nnext"


def test_unknown_tags_pass_through_and_whitespace_is_kept(fragment):
    p = fragment('<p>plain  <span class="ltx_text">text <sup>2</sup></span><!-- note --></p>')
    assert render_inline(p) == "plain  text 2"


def test_classification_prefers_math_and_citation(fragment):
    span = fragment('<span class="ltx_Math ltx_ref"></span>')
    cite = fragment('<a class="ltx_cite ltx_ref" href="#x"></a>')
    assert classify_inline(span) is InlineKind.MATH
    assert classify_inline(cite) is InlineKind.CITATION
    assert classify_inline(fragment("<blink>x</blink>")) is InlineKind.UNKNOWN
