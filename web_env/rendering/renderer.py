"""Jinja2-backed renderer for the environment report page."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

from web_env.domain import EnvironmentSnapshot

ENVIRONMENT_PAGE_TEMPLATE = "environment.html"


class EnvironmentPageRenderer:
    """Render environment snapshots into a complete HTML document.

    The template is loaded once from package data. Rendering is a pure function
    of the snapshot, so one renderer instance is shared by all requests.
    """

    def __init__(self, template_name: str = ENVIRONMENT_PAGE_TEMPLATE):
        """Initialize renderer and compile the page template.

        Args:
            template_name: Template file name under `web_env/rendering/templates`.

        Raises:
            jinja2.TemplateNotFound: Raised when the template is not packaged.
        """

        self._environment = Environment(
            loader=PackageLoader("web_env.rendering", "templates"),
            autoescape=select_autoescape(("html",)),
            keep_trailing_newline=True,
        )
        self._template = self._environment.get_template(template_name)

    def render_page(self, snapshot: EnvironmentSnapshot) -> str:
        """Render one snapshot.

        Args:
            snapshot: Environment snapshot to display.

        Returns:
            str: Fully substituted HTML document.
        """

        return self._template.render(
            hostname=snapshot.hostname,
            local_ip=snapshot.local_ip,
            variables=snapshot.variables,
        )
