from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from nextword import Nextword
from nextword.config import CANDIDATE_NUM
from nextword.errors import ConfigurationError, StorageError
from . import initialize

app = Flask(__name__)
_engine: Nextword | None = None

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    if _engine is None:
        return jsonify({"candidates": [], "error": "engine not initialized"}), 503
    try:
        rows = _engine.suggest(q)
    except StorageError as exc:
        return jsonify({"candidates": exc.candidates, "error": str(exc)}), 500
    return jsonify({"candidates": rows})

@app.get("/health")
def health():
    return jsonify({"ok": _engine is not None})

# ---------- UI ----------
@app.get("/")
def home():
    # Single input box; suggestions refresh as you type.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Nextword • Flask UI</title>
<style>
body{ margin:0; background:#0b0f14; color:#cfd8e3;
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Arial }
.container{ max-width:720px; margin:24px auto; padding:0 16px }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid #1c2530;
  background:#0b1117; color:#cfd8e3; font-size:16px; outline:none }
input:focus{ border-color:#6ee7ff }
#out{ margin-top:12px; display:flex; flex-wrap:wrap; gap:8px }
.w{ padding:4px 10px; border:1px solid #1c2530; border-radius:10px; cursor:pointer }
.err{ color:#ffb0b0; margin-top:12px }
</style>
</head>
<body>
  <div class="container">
    <h1>Nextword</h1>
    <input id="q" type="text" placeholder="Type some words…" autocomplete="off" autofocus />
    <div id="out"></div>
    <div id="err" class="err"></div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), err = document.querySelector("#err");
let t;
async function suggest(){
  err.textContent = "";
  const resp = await fetch(`/api/suggest?q=${encodeURIComponent(q.value)}`);
  const data = await resp.json();
  if(data.error){ err.textContent = `Error: ${data.error}`; }
  out.innerHTML = "";
  for(const w of data.candidates || []){
    const el = document.createElement("span");
    el.className = "w"; el.textContent = w;
    el.onclick = () => {
      const i = q.value.lastIndexOf(" ");
      q.value = q.value.slice(0, i + 1) + w + " ";
      q.focus(); suggest();
    };
    out.appendChild(el);
  }
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(suggest, 100); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Nextword")
    ap.add_argument("--data-path", default=None)
    ap.add_argument("-c", "--candidate-num", type=int, default=CANDIDATE_NUM)
    ap.add_argument("-g", "--greedy", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    try:
        _engine = initialize(args.data_path, candidate_num=args.candidate_num,
                             greedy=args.greedy, verbose=args.verbose)
    except ConfigurationError as exc:
        ap.error(str(exc))

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
