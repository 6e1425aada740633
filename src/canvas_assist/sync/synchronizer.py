"""
State Synchronizer
Keeps a component's trait store and attribute map consistent.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from canvas_assist.core import get_logger
from canvas_assist.fields import FieldDescriptor, FieldType
from canvas_assist.monitoring import MetricsCollector, metrics_collector, trace_operation
from .host import CanvasComponent
from .snapshot import ComponentSnapshot
from .values import attribute_keys, canonical_attribute, parse_float

logger = get_logger(__name__)

ChangeObserver = Callable[[dict[str, Any]], None]

TRUTHY_STRINGS = ("true", "1")


def coerce_value(descriptor: FieldDescriptor, raw: Any) -> Any:
    """
    Coerce a raw stored value to the field's type.

    Only strings are coerced; other values pass through untouched.
    """
    if not isinstance(raw, str):
        return raw

    if descriptor.type == FieldType.CHECKBOX:
        return raw in TRUTHY_STRINGS

    if descriptor.type == FieldType.NUMBER:
        number = parse_float(raw)
        return 0 if number is None else number

    return raw


def resolve_raw_value(snapshot: ComponentSnapshot, name: str) -> Any:
    """Trait value if a trait exists, else the first present attribute key, else None."""
    if name in snapshot.traits:
        return snapshot.traits[name]

    for key in attribute_keys(name):
        if key in snapshot.attributes:
            return snapshot.attributes[key]

    return None


class StateSynchronizer:
    """
    Reads field values from, and writes field changes to, a component.

    Reads go through a snapshot; writes go to the live host component
    the snapshot was taken from.
    """

    def __init__(
        self,
        observer: ChangeObserver | None = None,
        metrics: MetricsCollector | None = None,
    ) -> None:
        self.observer = observer
        self.metrics = metrics or metrics_collector

    def snapshot(self, component: CanvasComponent) -> ComponentSnapshot:
        """Take a fresh snapshot of a component."""
        return ComponentSnapshot.from_component(component)

    def extract_values(
        self, snapshot: ComponentSnapshot, fields: Iterable[FieldDescriptor]
    ) -> dict[str, Any]:
        """
        Current value of every field.

        Precedence is trait, then attribute keys in lookup order, then None.
        Coercion happens after precedence is settled, so a trait value wins
        even when it coerces poorly.

        Args:
            snapshot: Component snapshot
            fields: Resolved field set

        Returns:
            Mapping of field name to value (None when absent everywhere)
        """
        values = {
            descriptor.name: coerce_value(descriptor, resolve_raw_value(snapshot, descriptor.name))
            for descriptor in fields
        }
        logger.debug("values_extracted", component_id=snapshot.component_id, count=len(values))
        return values

    def apply_change(self, component: CanvasComponent, field_name: str, new_value: Any) -> None:
        """
        Write one field into both representations and notify.

        Every step runs even if an earlier one failed; failures are logged
        and never propagate, and nothing already written is rolled back.
        """
        component_id = component.get_id()

        with trace_operation("apply_change", component_id=component_id, field=field_name):
            try:
                self._write_trait(component, field_name, new_value)
            except Exception as e:
                logger.error("trait_write_failed", field=field_name, error=str(e))

            try:
                attributes = dict(component.get("attributes") or {})
                attributes[canonical_attribute(field_name)] = new_value
                component.set("attributes", attributes)
            except Exception as e:
                logger.error("attribute_write_failed", field=field_name, error=str(e))

            self.metrics.record_field_write()

            try:
                component.trigger("change:traits")
                render = getattr(component, "render", None)
                if callable(render):
                    render()
            except Exception as e:
                self.metrics.record_notify_error("host")
                logger.error("host_notify_failed", field=field_name, error=str(e))

            if self.observer is not None:
                try:
                    self.observer({field_name: new_value})
                except Exception as e:
                    self.metrics.record_notify_error("observer")
                    logger.error("observer_notify_failed", field=field_name, error=str(e))

        logger.info("field_applied", component_id=component_id, field=field_name)

    def apply_changes(
        self, component: CanvasComponent, changes: Mapping[str, Any]
    ) -> dict[str, Any]:
        """
        Apply a command change set to the component style.

        None removes the property; any other value is added or overwritten.

        Returns:
            The applied change set
        """
        applied: dict[str, Any] = {}
        for prop, value in changes.items():
            if value is None:
                component.remove_style(prop)
                self.metrics.record_style_change("remove")
            else:
                component.add_style({prop: value})
                self.metrics.record_style_change("add")
            applied[prop] = value

        logger.info("changes_applied", component_id=component.get_id(), properties=list(applied))
        return applied

    @staticmethod
    def _write_trait(component: CanvasComponent, field_name: str, new_value: Any) -> bool:
        for trait in component.get("traits") or []:
            if trait.name == field_name:
                trait.value = new_value
                return True
        return False
