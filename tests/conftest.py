import pytest


APOLLO_PAGE = """
<html><body>
<div class="mw-parser-output">
<p>July 20 is the 201st day of the year.</p>
<h2><span class="mw-headline" id="Events">Events</span></h2>
<ul>
<li><a href="/wiki/356_BC">356 BC</a> &#8211; Herostratus sets fire to the Temple of Artemis.</li>
<li><a href="/wiki/1402">1402</a> &#8211; Ottoman–Timurid War: Battle of Ankara.</li>
<li>1969 &#8211; <a href="/wiki/Apollo_11">Apollo 11</a> moon landing</li>
<li>not-an-entry</li>
</ul>
<h2><span class="mw-headline" id="Births">Births</span></h2>
<ul>
<li>1304 &#8211; Petrarch, Italian poet</li>
</ul>
</div>
</body></html>
"""


@pytest.fixture
def apollo_page():
    return APOLLO_PAGE
