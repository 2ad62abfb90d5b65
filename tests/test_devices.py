from scrapers import devices


def _row(*cells):
    inner = "".join(f'<div class="sc-eb3d5477-0 ijbjQB">{cell}</div>' for cell in cells)
    return f'<div class="sc-97391185-0 vdqnr">{inner}</div>'


def _container(*rows):
    header = '<div class="sc-edee8d04-0 cyEujK"><div>Name</div><div>Based on</div></div>'
    return f'<div class="sc-aabe08f-0 flgqeV">{header}{"".join(rows)}</div>'


SAMPLE_HTML = f"""
<main>
  <h2 id="guitar_amps">Guitar amps</h2>
  {_container(_row(" Brit 800 ", " Marshall JCM800 ", "1.0.0"), _row("Twin", "", "1.0.0"))}
  <h2 id="overdrive">Overdrive</h2>
  <p>Intro text</p>
  {_container(_row("Myth Drive", "Klon Centaur"))}
</main>
"""


def test_extract_devices_reads_name_and_based_on():
    parsed = devices.extract_devices(SAMPLE_HTML)
    assert parsed == [
        {"category": "Guitar amps", "name": "Brit 800", "basedOn": "Marshall JCM800"},
        {"category": "Guitar amps", "name": "Twin", "basedOn": ""},
        {"category": "Overdrive", "name": "Myth Drive", "basedOn": "Klon Centaur"},
    ]


def test_extract_devices_skips_blank_headings():
    html = f"<h2>   </h2>{_container(_row('Orphan', 'Nothing'))}"
    assert devices.extract_devices(html) == []


def test_heading_followed_by_heading_yields_nothing():
    html = f"<h2>Empty</h2><h2>Filled</h2>{_container(_row('Dev', 'Ref'))}"
    parsed = devices.extract_devices(html)
    assert [device["category"] for device in parsed] == ["Filled"]


def test_only_first_container_is_used():
    html = f"<h2>Cabs</h2>{_container(_row('A', 'a'))}{_container(_row('B', 'b'))}"
    assert [device["name"] for device in devices.extract_devices(html)] == ["A"]


def test_malformed_rows_are_dropped():
    html = f"<h2>Delays</h2>{_container(_row('Only one'), _row('  ', 'Ref'), _row('Good', 'Ref'))}"
    assert devices.extract_devices(html) == [{"category": "Delays", "name": "Good", "basedOn": "Ref"}]


def test_nested_heading_text_is_concatenated():
    html = f"<h2>Bass <span>amps</span></h2>{_container(_row('SVT', 'Ampeg SVT'))}"
    assert devices.extract_devices(html)[0]["category"] == "Bass amps"


def test_extraction_is_repeatable():
    assert devices.extract_devices(SAMPLE_HTML) == devices.extract_devices(SAMPLE_HTML)


def test_duplicates_are_preserved():
    html = f"<h2>Fx</h2>{_container(_row('Same', 'x'), _row('Same', 'x'))}"
    assert len(devices.extract_devices(html)) == 2


def test_scrape_devices_renders_with_selectors(monkeypatch):
    calls = []

    def fake_render(url, wait_selector=None, stable_selector=None):
        calls.append((url, wait_selector, stable_selector))
        return SAMPLE_HTML

    monkeypatch.setattr(devices, "render_page", fake_render)

    results = devices.scrape_devices("https://example.com/devices")
    assert len(results) == 3
    assert calls == [("https://example.com/devices", "h2", devices.ROW_SELECTOR)]


def test_scrape_devices_warns_when_nothing_found(monkeypatch, caplog):
    caplog.set_level("WARNING")
    monkeypatch.setattr(devices, "render_page", lambda url, wait_selector=None, stable_selector=None: "<html></html>")

    assert devices.scrape_devices("https://example.com/devices") == []
    assert any("No devices" in message for message in caplog.messages)
