# -----------------------------------------------------------------------------
# Streamlit Frontend for Crunchem
# Purpose:
#   Browse the calculator catalog by category, search it, keep favorites,
#   and run any calculator from a form built from its input schema.
#   All data and state live behind the API at API_URL.
#---------------------------------------------------------------------------

import os, json, requests, streamlit as st
from dotenv import load_dotenv

# Load .env to pick API_URL at runtime for local/remote backends
load_dotenv()
API_URL = os.getenv("API_URL","http://127.0.0.1:8000")

DARK_CSS = """
<style>
.stApp, [data-testid="stSidebar"] { background-color: #0e1117; color: #fafafa; }
.stApp h1, .stApp h2, .stApp h3, .stApp label, .stApp p { color: #fafafa; }
</style>
"""


def api_get(path, **params):
    r = requests.get(f"{API_URL}{path}", params=params or None, timeout=10)
    r.raise_for_status()
    return r.json()


def fmt_value(item):
    v, kind, unit = item["value"], item.get("format"), item.get("unit") or ""
    if kind == "currency" and isinstance(v, (int, float)):
        return f"${v:,.2f}"
    if kind == "percentage" and isinstance(v, (int, float)):
        return f"{v}%"
    text = f"{int(v):,}" if kind == "integer" and isinstance(v, (int, float)) else str(v)
    if unit == "%":
        return f"{text}%"
    if unit == "$":
        return f"${text}"
    return f"{text} {unit}".strip()


def render_field(calc_id, f):
    """One Streamlit widget per schema field; returns the raw value to send."""
    key = f"{calc_id}:{f['id']}"
    label = f["label"] + ("" if f["required"] else " (optional)")
    default = f.get("default_value")
    if f["type"] == "number":
        kwargs = {k: float(f[k]) for k in ("min", "max", "step") if k in f}
        return st.number_input(
            label, key=key, value=float(default) if default is not None else None,
            min_value=kwargs.get("min"), max_value=kwargs.get("max"), step=kwargs.get("step"),
            placeholder=f.get("placeholder") or None,
        )
    if f["type"] == "select":
        values = [o["value"] for o in f["options"]]
        labels = {o["value"]: o["label"] for o in f["options"]}
        if default in values:
            index = values.index(default)
        else:
            index = 0 if f["required"] else None
        return st.selectbox(label, values, index=index, key=key, format_func=labels.get)
    if f["type"] == "date":
        picked = st.date_input(label, value=None, key=key)
        return picked.isoformat() if picked else None
    return st.text_input(label, value=default or "", key=key, placeholder=f.get("placeholder", ""))


# ---------------- Preferences (sidebar state + theme) -------------------------
try:
    prefs = api_get("/preferences")
except requests.RequestException as e:
    prefs = {"favorites": [], "dark_mode": False, "sidebar_collapsed": False}
    api_error = str(e)
else:
    api_error = None

st.set_page_config(page_title="Crunchem Calculators", layout="centered",
                   initial_sidebar_state="collapsed" if prefs["sidebar_collapsed"] else "expanded")
if prefs["dark_mode"]:
    st.markdown(DARK_CSS, unsafe_allow_html=True)
st.title("Crunchem: Everyday & Science Calculators")
if api_error:
    st.error(f"API unavailable at {API_URL}: {api_error}")
    st.stop()

# ---------------- Sidebar: Category + Search ----------------------------------
with st.sidebar:
    st.subheader("Categories")
    cats = api_get("/categories")["items"]
    shown = [c for c in cats if c["count"] or c["name"] == "All"]
    category = st.radio("Category", [c["name"] for c in shown],
                        format_func=lambda n: f"{n} ({next(c['count'] for c in shown if c['name'] == n)})",
                        label_visibility="collapsed")
    query = st.text_input("Search", placeholder="e.g. tip, pace, matrix")
    favorites_only = st.toggle("Favorites only", value=False)
    dark = st.toggle("Dark mode", value=prefs["dark_mode"])
    collapsed = st.toggle("Start with sidebar collapsed", value=prefs["sidebar_collapsed"])
    if dark != prefs["dark_mode"] or collapsed != prefs["sidebar_collapsed"]:
        requests.patch(f"{API_URL}/preferences", json={"dark_mode": dark, "sidebar_collapsed": collapsed}, timeout=10)
        st.rerun()

# ---------------- Calculator picker -------------------------------------------
listing = api_get("/calculators", category=category, q=query)
items = listing["items"]
if favorites_only:
    items = [it for it in items if it["id"] in prefs["favorites"]]
st.caption(f"{len(items)} calculators")
if not items:
    st.info("No calculators match. Try another category or search term.")
    st.stop()

titles = {it["id"]: f"{'★ ' if it['id'] in prefs['favorites'] else ''}{it['title']}  ·  {it['category']}"
          for it in items}
calc_id = st.selectbox("Calculator", list(titles), format_func=titles.get)
calc = api_get(f"/calculators/{calc_id}")

# ---------------- Calculator detail + form ------------------------------------
head, star = st.columns([5, 1])
with head:
    st.subheader(calc["title"])
    st.write(calc["description"])
    st.caption(f"{calc['complexity']} · " + ", ".join(calc["tags"]))
with star:
    if st.button("★ Unfavorite" if calc["favorite"] else "☆ Favorite", key=f"fav:{calc_id}"):
        requests.post(f"{API_URL}/preferences/favorites/{calc_id}", timeout=10)
        st.rerun()

with st.expander("Formula"):
    st.code(calc["formula"], language="text")

with st.form(f"form:{calc_id}"):
    inputs = {f["id"]: render_field(calc_id, f) for f in calc["inputs"]}
    submit = st.form_submit_button("Calculate")

if submit:
    with st.spinner("Calculating..."):
        r = requests.post(f"{API_URL}/calculators/{calc_id}/calculate", json={"inputs": inputs}, timeout=30)
    if r.status_code != 200:
        st.error(f"Calculate error: {r.text}")
        st.stop()
    res = r.json()
    if not res.get("ok", False):
        # Failure path: show the message in place; trace for debugging
        st.error(res.get("error") or "Calculation failed.")
        with st.expander("Trace"):
            st.code(json.dumps(res.get("trace", []), indent=2))
    else:
        st.subheader("Results")
        cols = st.columns(min(3, len(res["results"])) or 1)
        for i, item in enumerate(res["results"]):
            cols[i % len(cols)].metric(item["label"], fmt_value(item))
        if res["explanation"]:
            st.subheader("Explanation")
            st.write("\n".join("• " + s for s in res["explanation"]))
        if res["steps"]:
            st.subheader("Steps")
            st.write("\n".join(f"{n}. {s}" for n, s in enumerate(res["steps"], 1)))
        with st.expander("Trace"):
            st.code(json.dumps(res["trace"], indent=2))
