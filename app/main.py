from pathlib import Path

from fasthtml.common import *
from monsterui.all import *

from ropes import RopesConfig, configure_ropes
from ropes.adapters.fasthtml import configure_app, updates_trigger
from ropes.app import set_config

from models import build_registry, build_transport
from view_models import ContactQuickStats, OutletQuickStats

datastar_script = Script(src="https://cdn.jsdelivr.net/gh/starfederation/datastar@v1.0.0-RC.5/bundles/datastar.js", type="module")

config = RopesConfig.from_environment()
set_config(config)

transport = build_transport(config.transport, Path(__file__).parent)
orchestrator = configure_ropes(config, transport=transport, registry=build_registry())
binder = orchestrator.binder

# DOM anchor -> view-model. The only thing a page has to tell us.
PAGE = {
    "#contact-quick-stats": ContactQuickStats,
    "#outlet-quick-stats": OutletQuickStats,
}

app, rt = fast_app(
    htmx=False,
    hdrs=(
        Theme.zinc.headers(),
        datastar_script,
    ),
)
configure_app(app, rt, orchestrator)


def stat(label: str, anchor: str, key: str):
    return Div(Span(f"{label}: ", cls=TextT.muted), Span(data_text=binder.signal_ref(anchor, key)))


@rt("/")
async def index():
    # Bound on the first request; later requests render the same view-models
    if not binder.bindings:
        orchestrator.bind(PAGE)
    contact = "#contact-quick-stats"
    outlet = "#outlet-quick-stats"
    return Main(
        H1("Quick Stats"),
        Card(
            binder.render(
                contact,
                H3(data_text=binder.signal_ref(contact, "name")),
                stat("Phone", contact, "phone"),
                stat("Email", contact, "email"),
                stat("Born", contact, "born_ago"),
                stat("Outlet", contact, "outlet_name"),
            ),
            cls=CardT.default,
        ),
        Card(
            binder.render(
                outlet,
                H3(data_text=binder.signal_ref(outlet, "name")),
                stat("Circulation", outlet, "circulation"),
            ),
            cls=CardT.default,
        ),
        Div(data_on_load=updates_trigger()),
        cls="container mx-auto p-8 max-w-3xl",
    )


if __name__ == "__main__":
    serve(port=8080)
