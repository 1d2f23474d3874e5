import pytest
from bs4 import BeautifulSoup

PAPER_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>Attention Is All You Need</title></head>
<body>
<div class="ltx_page_main"><div class="ltx_page_content">
<article class="ltx_document ltx_authors_1line">
<h1 class="ltx_title ltx_title_document">Attention Is <span class="ltx_font_italic">All</span> You Need</h1>
<div class="ltx_authors">
<span class="ltx_creator ltx_role_author"><span class="ltx_personname">Ashish Vaswani
</span></span><span class="ltx_author_before">  </span>
<span class="ltx_creator ltx_role_author"><span class="ltx_personname">Noam Shazeer</span></span>
</div>
<div class="ltx_abstract">
<h6 class="ltx_title ltx_title_abstract">Abstract</h6>
<p class="ltx_p">We propose the <span class="ltx_text ltx_font_bold">Transformer</span>.</p>
</div>
<section class="ltx_section" id="S1">
<h2 class="ltx_title ltx_title_section"><span class="ltx_tag ltx_tag_section">1 </span>Introduction</h2>
<div class="ltx_para" id="S1.p1">
<p class="ltx_p">Recurrent models <cite class="ltx_cite ltx_citemacro_cite">[<a class="ltx_ref" href="#bib.bib1">1</a>]</cite> are slow.</p>
</div>
</section>
<section class="ltx_bibliography" id="bib">
<h2 class="ltx_title ltx_title_bibliography">References</h2>
<ul class="ltx_biblist">
<li class="ltx_bibitem" id="bib.bib1">
<span class="ltx_tag ltx_role_refnum ltx_tag_bibitem">[1]</span>
<span class="ltx_bibblock">Sepp Hochreiter.</span>
<span class="ltx_bibblock">Long short-term memory.</span>
</li>
<li class="ltx_bibitem" id="bib.bib2">
<span class="ltx_bibblock">Untagged entry.</span>
</li>
</ul>
</section>
<section class="ltx_appendix" id="A1">
<h2 class="ltx_title ltx_title_appendix">Appendix A Proofs</h2>
<div class="ltx_para"><p class="ltx_p">Proof details.</p></div>
</section>
</article>
</div></div>
</body>
</html>
"""

NO_ABSTRACT_HTML = """<html><body>
<article class="ltx_document">
<h1 class="ltx_title ltx_title_document">A Note</h1>
<section class="ltx_section" id="S1">
<h2 class="ltx_title ltx_title_section">1 Result</h2>
<div class="ltx_para"><p class="ltx_p">It works.</p></div>
</section>
</article>
</body></html>
"""


def parse_fragment(html):
    """Parse an HTML snippet and return its first element."""
    soup = BeautifulSoup(html, "html.parser")
    return soup.find(True)


@pytest.fixture
def paper_html():
    return PAPER_HTML


@pytest.fixture
def paper_soup():
    return BeautifulSoup(PAPER_HTML, "html.parser")


@pytest.fixture
def no_abstract_html():
    return NO_ABSTRACT_HTML


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        self.headers = {"Content-Type": "text/html; charset=utf-8"}
        self.encoding = "utf-8"

    @property
    def ok(self):
        return 200 <= self.status_code < 300


@pytest.fixture
def fragment():
    return parse_fragment


@pytest.fixture
def fake_response():
    return FakeResponse
