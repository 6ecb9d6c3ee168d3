# chunking/render.py

from markup_kit.markup import LIST_TAGS, MarkupNode

BULLET = "• "


def render_table(table: MarkupNode) -> str:
    """
    Flatten a table into one line per row:

        Table Headers: Name | Age
        Row: John | 25
    """
    lines = []
    headers = [th.text for th in table.find_all("th")]
    if headers:
        lines.append("Table Headers: " + " | ".join(headers))

    for tr in table.find_all("tr"):
        cells = [td.text for td in tr.children if td.tag == "td"]
        if cells:
            lines.append("Row: " + " | ".join(cells))
    return "\n".join(lines)


def render_list(list_node: MarkupNode) -> str:
    # Only direct items get a bullet; nested list text stays inside its item
    return "\n".join(BULLET + li.text for li in list_node.children if li.tag == "li")


def render_element(node: MarkupNode) -> str:
    if node.tag == "table":
        return render_table(node)
    if node.tag in LIST_TAGS:
        return render_list(node)
    return node.text
