"""TODO MVC page shell built from arrayhtml elements.

Render it with ``arrayhtml render todomvc:App --app-dir examples --doctype``.
"""

TODOS = [
    {"title": "Write the renderer", "done": True},
    {"title": "Escape <everything>", "done": False},
]


def TodoItem(props):
    return [
        "li",
        {"class": "completed" if props["done"] else None},
        ["input", {"class": "toggle", "type": "checkbox", "checked": props["done"]}],
        ["label", props["title"]],
    ]


def TodoList(props):
    return ["ul", {"class": "todo-list"}, *[[TodoItem, todo] for todo in props["todos"]]]


def App(props):
    return [
        "html",
        {"lang": "en"},
        ["head", ["meta", {"charset": "utf-8"}], ["title", "TODO MVC"]],
        [
            "body",
            ["div", {"class": "todoapp"}, ["h1", "TODO MVC"], [TodoList, {"todos": TODOS}]],
        ],
    ]
