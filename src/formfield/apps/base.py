"""FormApp — shared model/update/submit loop for the example forms.

Each concrete form supplies its starting fields, display labels, and one
validator chain per field. The base class handles messages, renders rows
through :func:`formfield.domain.field.view`, and turns a submission into
an :class:`AppResult`.

Fields are validated independently; no check ever looks at two fields.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, ClassVar

import structlog

from formfield.apps.messages import Blur, Focus, Input, Msg, SetDisabled, Submit
from formfield.apps.result import AppError, AppResult
from formfield.domain.field import (
    Field,
    Metadata,
    reset_value,
    to_result,
    update_metadata,
    view,
)
from formfield.domain.result import Ok
from formfield.domain.validators import Validator, traced

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FormModel:
    """Immutable snapshot of a form: field name to field, in display order."""

    fields: dict[str, Field[Any, str]]
    submitted: bool = False

    def get(self, name: str) -> Field[Any, str] | None:
        return self.fields.get(name)

    def with_field(self, name: str, field: Field[Any, str]) -> FormModel:
        return replace(self, fields={**self.fields, name: field})


class FormApp(ABC):
    """Abstract base for the example forms.

    Usage::

        app = SignupForm()
        model = app.run([Input("email", "ab@cd.ef"), Submit()])
        result = app.submit(model)
    """

    op: ClassVar[str]
    labels: ClassVar[dict[str, str]]

    def __init__(self) -> None:
        self._validators: dict[str, Validator[Any, str]] = {
            name: traced(validator, logger, name=f"{self.op}.{name}")
            for name, validator in self.validators().items()
        }

    @abstractmethod
    def initial_fields(self) -> dict[str, Field[Any, str]]:
        """Starting field for every input, in display order."""
        ...

    @abstractmethod
    def validators(self) -> dict[str, Validator[Any, str]]:
        """Validator chain for every input."""
        ...

    # ------------------------------------------------------------------
    # Model / update
    # ------------------------------------------------------------------

    def init(self) -> FormModel:
        return FormModel(fields=self.initial_fields())

    def update(self, model: FormModel, msg: Msg) -> FormModel:
        """Apply one message and return the new model."""
        if isinstance(msg, Submit):
            return self._validate_all(model)
        if not isinstance(msg, (Focus, Blur, Input, SetDisabled)):
            raise TypeError(f"Unsupported message: {msg!r}")

        current = model.get(msg.name)
        if current is None:
            logger.warning("form.unknown_field", form=self.op, field=msg.name)
            return model

        if isinstance(msg, Focus):
            updated = update_metadata(current, active=True)
        elif isinstance(msg, Blur):
            updated = update_metadata(current, active=False, touched=True)
        elif isinstance(msg, Input):
            # Editing clears the previous error before the chain re-runs.
            edited = reset_value(current, msg.value, replace(current.metadata, touched=True))
            updated = self._validate(msg.name, edited)
        else:
            updated = update_metadata(current, disabled=msg.disabled)
        return model.with_field(msg.name, updated)

    def run(self, messages: Iterable[Msg], model: FormModel | None = None) -> FormModel:
        """Feed *messages* to :meth:`update` in order, starting from *model*."""
        current = model if model is not None else self.init()
        for msg in messages:
            current = self.update(current, msg)
        return current

    # ------------------------------------------------------------------
    # View / submit
    # ------------------------------------------------------------------

    def rows(self, model: FormModel) -> list[dict[str, Any]]:
        """Describe every field for display, one dict per field."""
        rows: list[dict[str, Any]] = []
        for name, field in model.fields.items():
            label = self.labels.get(name, name)
            rows.append(
                view(
                    field,
                    on_valid=lambda meta, value: _row(name, label, meta, value, None),
                    on_invalid=lambda meta, value, error: _row(name, label, meta, value, error),
                )
            )
        return rows

    def submit(self, model: FormModel) -> AppResult:
        """Validate every enabled field and build the submission result.

        Disabled fields are neither validated nor submitted.
        """
        model = self.update(model, Submit())
        rows = self.rows(model)
        warnings: list[str] = []
        values: dict[str, Any] = {}
        errors: dict[str, str] = {}

        for name, field in model.fields.items():
            if field.metadata.disabled:
                warnings.append(f"{name} is disabled and was not submitted")
                continue
            outcome = to_result(field)
            if isinstance(outcome, Ok):
                values[name] = outcome.value
            else:
                errors[name] = outcome.error

        if errors:
            logger.info("form.rejected", form=self.op, invalid=sorted(errors))
            return AppResult(
                ok=False,
                op=self.op,
                data={"fields": rows},
                warnings=warnings,
                error=AppError(
                    code="INVALID_FORM",
                    message=f"{len(errors)} field(s) failed validation",
                    detail={"errors": errors},
                ),
            )

        logger.info("form.submitted", form=self.op, fields=sorted(values))
        return AppResult(
            ok=True,
            op=self.op,
            data={"fields": rows, "values": values},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _validate(self, name: str, field: Field[Any, str]) -> Field[Any, str]:
        if field.metadata.disabled:
            return field
        return self._validators[name](field)

    def _validate_all(self, model: FormModel) -> FormModel:
        fields = {
            name: self._validate(name, update_metadata(field, touched=True))
            for name, field in model.fields.items()
        }
        return replace(model, fields=fields, submitted=True)


def _row(name: str, label: str, meta: Metadata, value: Any, error: str | None) -> dict[str, Any]:
    return {
        "name": name,
        "label": label,
        "value": value,
        "valid": error is None,
        "error": error,
        "touched": meta.touched,
        "active": meta.active,
        "disabled": meta.disabled,
    }
