import pytest

from markup_kit.parsers import MarkupParser, ParsedDocument

SAMPLE_PAGE = """
<html>
<head>
<title>Deployment Guide</title>
<meta name="author" content="Jane Doe">
<meta name="description" content="How we ship">
<meta name="empty" content="">
</head>
<body>
<h1>Overview</h1>
<p>Intro paragraph.</p>
<h2>Setup</h2>
<p>Install the tools.</p>
<ul>
<li>Python</li>
<li>Docker
<ol><li>Engine</li><li>Compose</li></ol>
</li>
</ul>
<h2>Reference</h2>
<table>
<caption>Ports</caption>
<tr><th>Service</th><th>Port</th></tr>
<tr><td>web</td><td colspan="2">8080</td></tr>
<tr><td>db</td><td rowspan="x">5432</td></tr>
</table>
<pre class="language-bash">make deploy</pre>
<code class="sql">SELECT 1</code>
<h1>Links</h1>
<p><a href="/wiki/spaces/ENG/pages/1" title="Home">Home</a>
<a href="https://example.com/download/attachments/1/design.pdf">Design</a>
<a href="https://python.org">Python</a></p>
<p><img src="/download/attachments/1/diagram.png" alt="Diagram" width="400"><img src="https://cdn.example.com/logo.png"></p>
</body>
</html>
"""


@pytest.fixture(scope="module")
def sample_markup() -> str:
    return SAMPLE_PAGE


@pytest.fixture(scope="module")
def parsed_sample() -> ParsedDocument:
    """Parse the sample page once, reuse across tests."""
    result = MarkupParser().parse(SAMPLE_PAGE)
    assert isinstance(result, ParsedDocument)
    return result
