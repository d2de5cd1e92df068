# example.py
from colorize import Colorizer, StyleSpec, Theme

out = Colorizer(theme="vibrant")

out.info("Deploying build 412").success("Artifacts uploaded").warning("Cache miss on 3 layers")

# Register a theme and switch to it
out.create_theme("ops", {
    "success": {"color": "green", "emphasis": "bright"},
    "error": {"color": "white", "background_color": "bgRed"},
    "warning": {"color": "yellow"},
    "info": {"color": "cyan", "emphasis": "dim"},
    "debug": {"color": "magenta", "emphasis": "dim"},
    "prompt": {"color": "white", "emphasis": "underscore"},
}).set_theme("ops")

out.error("Health check failed on web-02")
out.table({"web-01": "ok", "web-02": "failed"}, "Node status:")

# One-off theme, not registered
out.set_theme(Theme(
    name="alert",
    success=StyleSpec("green"),
    error=StyleSpec("red", emphasis="blink"),
    warning=StyleSpec("yellow", emphasis="bright"),
    info=StyleSpec("blue"),
    debug=StyleSpec("white", emphasis="dim"),
    prompt=StyleSpec("white", emphasis="bright"),
))
answer = input(out.format_prompt("Roll back? [y/N] "))
out.set_enabled(False).info(f"answer={answer!r}")
