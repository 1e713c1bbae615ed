# ABOUTME: Shared fixtures with trimmed-down Bulbapedia page markup
# ABOUTME: Pages keep only the structure the extractors rely on

import pytest

from bulbapedia_crawler.config import Config
from bulbapedia_crawler.extraction.wiki.source import parse_html

INDEX_PAGE = """
<html><body>
<div id="bodyContent">
  <table class="navigation">
    <tr><td>List</td><td>#0151</td><td></td><td>Mew</td></tr>
  </table>
  <h3>Generation I</h3>
  <table class="roundy">
    <tr><th>Ndex</th><th>Ndex</th><th>MS</th><th>Pokémon</th><th>Type</th></tr>
    <tr><td>0001</td><td>#0001</td><td><img src="bulbasaur.png"/></td><td><a href="/wiki/Bulbasaur_(Pok%C3%A9mon)">Bulbasaur</a></td><td>Grass</td></tr>
    <tr><td></td><td> #0025 </td><td></td><td> Pikachu </td><td>Electric</td></tr>
    <tr><td></td><td>#0001</td><td></td><td>Bulbasaur-dup</td><td>Grass</td></tr>
    <tr><td></td><td>#0004</td><td>Charmander</td></tr>
    <tr><td></td><td>N/A</td><td></td><td>MissingNo.</td></tr>
    <tr><td></td><td>#0000</td><td></td><td>Zero</td></tr>
  </table>
  <h3>Generation II</h3>
  <table class="roundy">
    <tr><td></td><td>#0152</td><td></td><td>Chikorita</td></tr>
  </table>
</div>
</body></html>
"""

SPECIES_PAGE = """
<html><body>
<div id="bodyContent">
<div id="mw-content-text">
  <table class="navigation"><tr><td>#0151 Mew</td><td>#0002 Ivysaur</td></tr></table>
  <table class="roundy" id="info">
    <tr><td colspan="2">
      <table><tr><td><big><big><b>Bulbasaur</b></big></big></td></tr></table>
    </td></tr>
    <tr><td colspan="2"><b><a href="/wiki/Type">Type</a></b>
      <table><tr>
        <td><table><tr>
          <td><a href="/wiki/Grass_(type)"><span><b>Grass</b></span></a></td>
          <td><a href="/wiki/Poison_(type)"><span><b>Poison</b></span></a></td>
          <td>Unknown</td>
        </tr></table></td>
        <td style="display: none;"><table><tr><td>Fire</td></tr></table></td>
      </tr></table>
    </td></tr>
    <tr>
      <td><b>Catch rate</b><table><tr><td>45 <small>(5.9%)</small></td></tr></table></td>
      <td><b>Base experience yield</b><table><tr><td>64</td></tr></table></td>
    </tr>
    <tr>
      <td><b>Hatch time</b><table><tr><td>5,140 - 5,396 <small>steps</small></td></tr></table></td>
      <td><b>Base friendship</b><table><tr><td>50 <small>(normal)</small></td></tr></table></td>
    </tr>
  </table>
  <p>
    Bulbasaur is a dual-type Grass/Poison Pokémon introduced in Generation I.
  </p>
  <p>   </p>
  <p>It evolves into Ivysaur starting at level 16.</p>
  <div id="toc">Contents</div>
  <p>Not part of the introduction.</p>
</div>
</div>
</body></html>
"""


@pytest.fixture
def index_document():
    return parse_html(INDEX_PAGE)


@pytest.fixture
def species_document():
    return parse_html(SPECIES_PAGE)


@pytest.fixture
def test_config():
    """Configuration with instant retries and no persistent cache."""
    return Config(
        base_url="https://bulbapedia.test/wiki/",
        fetch_max_attempts=3,
        fetch_min_wait=0,
        fetch_max_wait=0,
        details_cache_enabled=False,
    )
