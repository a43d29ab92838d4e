import streamlit as st
import time
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from space_filling_curves.paths import make_indexer, path_array
from space_filling_curves.locality import path_stats
from space_filling_curves.playback import PathPlayback

st.set_page_config(page_title="Space-Filling Curve Dashboard", layout="wide")

st.title("Space-Filling Curve Dashboard")
st.markdown("Compare how the Hilbert curve and the Morton (Z-order) curve walk a 2^order grid.")

CURVE_COLORS = {
    "hilbert": "rgb(129, 140, 248)",
    "morton": "rgb(236, 72, 153)",
}
BASE_DELAY = 0.05  # seconds per step at 1.0x

st.sidebar.header("Configuration")

order = st.sidebar.slider("Order", min_value=1, max_value=7, value=3,
                          help="Grid side is 2^order")
speed = st.sidebar.slider("Animation Speed", min_value=0.1, max_value=5.0, value=1.0, step=0.1,
                          format="%.1fx")

st.sidebar.subheader("Display")
show_grid = st.sidebar.checkbox("Show Grid", value=True)
show_numbers = st.sidebar.checkbox("Show Numbers", value=order <= 4,
                                   help="Label each cell with its curve index")
show_animation = st.sidebar.checkbox("Animation Mode", value=True,
                                     help="Draw only up to the current step")


def build_playbacks(order):
    """Rebuild both paths; called whenever the order changes."""
    playbacks = {}
    for name in CURVE_COLORS:
        indexer = make_indexer(name, order)
        playbacks[name] = PathPlayback(path_array(indexer))
    return playbacks


if st.session_state.get("order") != order:
    st.session_state.order = order
    st.session_state.playbacks = build_playbacks(order)

playbacks = st.session_state.playbacks
n = 1 << order


def curve_figure(name, playback):
    path = playback.path
    end_step = playback.drawn_until(show_animation)
    markers = playback.markers(show_animation)
    drawn = path[:end_step + 1]
    color = CURVE_COLORS[name]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=drawn[:, 0], y=drawn[:, 1],
        mode="lines",
        line=dict(color=color, width=3),
        name="Path",
        hoverinfo="skip",
    ))

    if show_numbers:
        alpha = np.where(np.arange(len(path)) <= end_step, 0.9, 0.3)
        fig.add_trace(go.Scatter(
            x=path[:, 0], y=path[:, 1],
            mode="text",
            text=[str(i) for i in range(len(path))],
            textfont=dict(size=max(8, 240 // n), color=[f"rgba(71, 85, 105, {a})" for a in alpha]),
            name="Index",
            hoverinfo="skip",
        ))

    fig.add_trace(go.Scatter(
        x=[path[0, 0]], y=[path[0, 1]], mode="markers",
        marker=dict(color="#10b981", size=12), name="Start",
    ))
    if markers["current"] is not None:
        fig.add_trace(go.Scatter(
            x=[path[markers["current"], 0]], y=[path[markers["current"], 1]], mode="markers",
            marker=dict(color=color, size=16, line=dict(color="white", width=2)), name="Current",
        ))
    if markers["end"] is not None:
        fig.add_trace(go.Scatter(
            x=[path[-1, 0]], y=[path[-1, 1]], mode="markers",
            marker=dict(color="#ef4444", size=12), name="End",
        ))

    axis = dict(
        range=[-0.5, n - 0.5],
        showgrid=show_grid,
        dtick=1,
        tick0=-0.5,
        gridcolor="rgba(148, 163, 184, 0.3)",
        showticklabels=False,
        zeroline=False,
    )
    fig.update_layout(
        title=f"{name.capitalize()} Curve (order {order})",
        xaxis=axis,
        # Row 0 at the top, like a canvas.
        yaxis=dict(axis, range=[n - 0.5, -0.5], scaleanchor="x"),
        height=520,
        showlegend=False,
        margin=dict(l=20, r=20, t=50, b=20),
    )
    return fig


col1, col2, col3, col4 = st.columns([1, 1, 1, 3])
with col1:
    play = st.button("Play", type="primary", use_container_width=True)
with col2:
    # The click reruns the script, which ends a running animation loop;
    # playbacks in session state keep their current step.
    st.button("Pause", use_container_width=True)
with col3:
    if st.button("Reset", use_container_width=True):
        for playback in playbacks.values():
            playback.reset()
with col4:
    st.info(f"Configuration: order {order}, {n}x{n} grid, {n * n:,} cells per curve")

chart_cols = st.columns(2)
placeholders = {}
for col, name in zip(chart_cols, CURVE_COLORS):
    with col:
        placeholders[name] = {
            "chart": st.empty(),
            "metrics": st.empty(),
        }


def render(frame=0):
    for name, playback in playbacks.items():
        placeholders[name]["chart"].plotly_chart(curve_figure(name, playback), use_container_width=True,
                                                 key=f"{name}-chart-{frame}")
        with placeholders[name]["metrics"].container():
            m1, m2, m3 = st.columns(3)
            m1.metric("Progress", f"{playback.progress()}%")
            m2.metric("Current Index", playback.current_step)
            m3.metric("Coordinate", playback.current_coord())


render()

if play:
    delay = BASE_DELAY / speed
    frame = 0
    while any([playback.step() for playback in playbacks.values()]):
        frame += 1
        render(frame)
        time.sleep(delay)

st.markdown("---")
st.subheader("Locality Comparison")

stats_rows = []
for name, playback in playbacks.items():
    stats = path_stats(playback.path)
    stats_rows.append({
        "Curve": name.capitalize(),
        "Mean Step": round(stats["mean_step"], 3),
        "Max Step": stats["max_step"],
        "Jumps (>1)": stats["jumps"],
        "Path Length": stats["total_length"],
    })
st.dataframe(pd.DataFrame(stats_rows), use_container_width=True, hide_index=True)
