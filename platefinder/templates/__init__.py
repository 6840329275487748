from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("platefinder", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)

standalone_recipe_template = env.get_template("standalone_recipe.html")
