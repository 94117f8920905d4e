"""Fixed folder names inside a site's input root."""

layouts = "layouts"
partials = "partials"
helpers = "helpers"
