"""
Element tree the pitch renderer draws into: classes, attributes, inline
styles, children and bubbling event listeners, serializable to markup.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional

from markupsafe import Markup, escape

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

Listener = Callable[["Event"], None]


class Event:
    """A pointer or keyboard event dispatched to an element."""

    def __init__(self, event_type: str, key: Optional[str] = None):
        self.type = event_type
        self.key = key
        self.target: Optional[Element] = None
        self.default_prevented = False
        self.propagation_stopped = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Element:
    """A node in the rendered tree."""

    def __init__(self, tag: str, class_name: str = "", namespace: Optional[str] = None,
                 text: Optional[str] = None, **attributes: str):
        self.tag = tag
        self.namespace = namespace
        self.class_list: List[str] = class_name.split()
        self.attributes: Dict[str, str] = {k.replace("_", "-"): str(v) for k, v in attributes.items()}
        self.style: Dict[str, str] = {}
        self.text = text
        self.children: List[Element] = []
        self.parent: Optional[Element] = None
        self._listeners: Dict[str, List[Listener]] = {}

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Element) -> None:
        self.children.remove(child)
        child.parent = None

    def remove(self) -> None:
        """Detach this element from its parent, if any."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def iter(self) -> Iterator[Element]:
        """This element and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, class_name: str) -> List[Element]:
        """Descendants (excluding self) carrying a class."""
        return [el for el in self.iter() if el is not self and class_name in el.class_list]

    def find(self, class_name: str) -> Optional[Element]:
        matches = self.find_all(class_name)
        return matches[0] if matches else None

    def add_class(self, *names: str) -> None:
        for name in names:
            if name and name not in self.class_list:
                self.class_list.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.class_list:
            self.class_list.remove(name)

    def has_class(self, name: str) -> bool:
        return name in self.class_list

    def set_attribute(self, name: str, value) -> None:
        self.attributes[name] = str(value)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listeners(self, event_type: str) -> List[Listener]:
        return list(self._listeners.get(event_type, []))

    def dispatch_event(self, event: Event) -> Event:
        """Run listeners on this element, then bubble up until stopped."""
        event.target = self
        node: Optional[Element] = self
        while node is not None and not event.propagation_stopped:
            for listener in node.listeners(event.type):
                listener(event)
            node = node.parent
        return event

    def click(self) -> Event:
        return self.dispatch_event(Event("click"))

    def press_key(self, key: str) -> Event:
        return self.dispatch_event(Event("keydown", key=key))

    def _style_text(self) -> str:
        return "; ".join(f"{name}: {value}" for name, value in self.style.items())

    def to_html(self) -> Markup:
        """Serialize the subtree to markup with escaped text and attributes."""
        attributes = []
        if self.namespace == SVG_NAMESPACE and self.tag == "svg":
            attributes.append(("xmlns", SVG_NAMESPACE))
        if self.class_list:
            attributes.append(("class", " ".join(self.class_list)))
        attributes.extend(self.attributes.items())
        if self.style:
            attributes.append(("style", self._style_text()))

        opening = self.tag + "".join(f' {name}="{escape(value)}"' for name, value in attributes)
        body = escape(self.text) if self.text is not None else Markup("")
        body += Markup("").join(child.to_html() for child in self.children)

        # SVG shapes without content close themselves
        if self.namespace == SVG_NAMESPACE and not body:
            return Markup(f"<{opening}/>")
        return Markup(f"<{opening}>") + body + Markup(f"</{self.tag}>")
