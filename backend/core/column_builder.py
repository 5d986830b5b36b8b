"""Column templates for the configuration database tables.

Each entity type has one builder that lays out its columns in a fixed
order. Reference columns are resolved against the configuration base at
call time, so the lookup values always reflect the current data.
"""

import enum
import logging
from collections.abc import Callable

from core.columns import plain_column, reference_column
from core.config_base import ConfigBase
from core.localization import LocalizedHeaderSet, translate_headers
from core.reference_source import build_reference_source
from core.responses import ColumnDescriptor

logger = logging.getLogger(__name__)


class EntityType(str, enum.Enum):
    """Entity types that have a column template."""

    OBJECT = "Object"
    DEVICE = "Device"


class ColumnBuilder:
    """Creates grid columns for configuration database entities."""

    def __init__(
        self,
        config_base: ConfigBase,
        headers: LocalizedHeaderSet | None = None,
    ):
        if config_base is None:
            raise ValueError("config_base is required to build reference columns")
        self.config_base = config_base
        self.headers = headers

        self._templates: dict[EntityType, Callable[[], list[ColumnDescriptor]]] = {
            EntityType.OBJECT: self._object_columns,
            EntityType.DEVICE: self._device_columns,
        }

    @staticmethod
    def entity_types() -> list[EntityType]:
        return list(EntityType)

    def _object_columns(self) -> list[ColumnDescriptor]:
        return [
            plain_column("ObjNum"),
            plain_column("Name"),
            plain_column("Descr"),
        ]

    def _device_columns(self) -> list[ColumnDescriptor]:
        return [
            plain_column("KPNum"),
            plain_column("Name"),
            reference_column(
                "KPTypeID",
                "KPTypeID",
                "Name",
                build_reference_source(self.config_base.device_types, "KPTypeID", "Name"),
            ),
            plain_column("Address"),
            plain_column("CallNum"),
            reference_column(
                "CommLineNum",
                "CommLineNum",
                "Name",
                build_reference_source(
                    self.config_base.comm_lines, "CommLineNum", "Name", include_blank=True
                ),
            ),
            plain_column("Descr"),
        ]

    def create_columns(self, entity_type: EntityType | str) -> list[ColumnDescriptor]:
        """Create the columns for an entity type.

        Returns an empty list for entity types without a template.
        """
        try:
            entity_type = EntityType(entity_type)
        except ValueError:
            logger.debug("No column template for entity type %r", entity_type)
            return []

        columns = self._templates[entity_type]()
        return translate_headers(entity_type.value, columns, self.headers)
