from lxml import etree


def xmlstring(root):
    if isinstance(root, (str, bytes)):
        return root if isinstance(root, str) else root.decode("utf-8", "replace")
    if isinstance(root, list):
        return "\n".join(xmlstring(x) for x in root)
    try:
        return etree.tostring(root, pretty_print=True).decode("utf-8")
    except TypeError:
        return repr(root)
