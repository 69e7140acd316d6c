"""Minimal browser UI that consumes the classification and map API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Upload page that shows the result on the art style map."""
    return HTMLResponse(_INDEX_HTML)


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>ArtYatra</title>
    <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      button { padding: 0.4rem 0.8rem; }
      #map { height: 420px; margin-top: 1rem; }
      #result { white-space: pre-wrap; }
    </style>
  </head>
  <body>
    <h1>ArtYatra</h1>
    <div class="row">
      <input id="image" type="file" accept="image/*" />
      <button onclick="classify()">Classify</button>
    </div>
    <div id="result">Upload an artwork to discover its style.</div>
    <div id="map"></div>
    <script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
    <script>
      const map = L.map('map').setView([20.5937, 78.9629], 5);
      L.tileLayer('https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png', {
        attribution: '&copy; OpenStreetMap contributors', maxZoom: 10
      }).addTo(map);
      const layer = L.layerGroup().addTo(map);

      async function drawMap(highlight) {
        const query = highlight ? '?highlight=' + encodeURIComponent(highlight) : '';
        const res = await fetch('/api/map' + query);
        const view = await res.json();
        layer.clearLayers();
        for (const m of view.markers) {
          L.circleMarker([m.lat, m.lng], {
            radius: m.size / 3, color: '#fff', weight: 2,
            fillColor: m.color, fillOpacity: 0.9
          }).bindPopup(m.name + ' (' + m.state + ')').addTo(layer);
        }
        map.setView([view.center.lat, view.center.lng], view.zoom);
      }

      async function classify() {
        const input = document.getElementById('image');
        const output = document.getElementById('result');
        if (!input.files.length) { output.textContent = 'Choose an image first.'; return; }
        const form = new FormData();
        form.append('image', input.files[0]);
        output.textContent = 'Classifying...';
        const res = await fetch('/api/classify', { method: 'POST', body: form });
        const data = await res.json();
        if (!res.ok) {
          output.textContent = 'Error: ' + (data.message || data.error);
          return;
        }
        sessionStorage.setItem('classificationResult', JSON.stringify(data));
        const style = data.artStyle;
        output.textContent = style.name + ' from ' + style.state + ' ('
          + data.classification.confidence.toFixed(0) + '% confidence)\\n'
          + data.classification.reasoning;
        await drawMap(style.id);
      }

      const stored = sessionStorage.getItem('classificationResult');
      drawMap(stored ? JSON.parse(stored).artStyle.id : null);
    </script>
  </body>
</html>
"""
