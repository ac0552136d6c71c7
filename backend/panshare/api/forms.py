"""
Admin Page Descriptors

Static configuration of the admin pan-share pages: the columns of the
list table and the fields of the add/edit forms. The admin frontend
renders whatever it is given here; the API also checks submissions
against the required flags of the matching form.

    GET /admin/pan-shares/forms/add   → ADD_FORM
    GET /admin/pan-shares/forms/edit  → EDIT_FORM
    GET /admin/pan-shares             → rows + TABLE
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from panshare.shared.core.exceptions import ValidationError
from panshare.shared.models.enums import (
    DISK_TYPE_LABELS,
    PAN_SHARE_STATUS_LABELS,
    DiskType,
    PanShareStatus,
)


@dataclass(frozen=True)
class Option:
    label: str
    value: str


@dataclass(frozen=True)
class FormField:
    """One input of an admin form. name is the camelCase wire key."""

    name: str
    label: str
    input: str = "text"
    required: bool = False
    placeholder: Optional[str] = None
    tip: Optional[str] = None
    options: tuple[Option, ...] = ()


@dataclass(frozen=True)
class TableColumn:
    key: str
    title: str
    width: Optional[int] = None
    render: str = "text"


@dataclass(frozen=True)
class FormDescriptor:
    name: str
    title: str
    submit_label: str
    fields: tuple[FormField, ...] = field(default_factory=tuple)

    def missing_fields(self, payload: dict[str, Any]) -> list[str]:
        """Required fields that are absent or blank in a camelCase payload."""
        missing = []
        for form_field in self.fields:
            if not form_field.required:
                continue
            value = payload.get(form_field.name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(form_field.name)
        return missing

    def validate(self, payload: dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Listing every missing required field
        """
        missing = self.missing_fields(payload)
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                details={"fields": missing},
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "submitLabel": self.submit_label,
            "fields": [asdict(form_field) for form_field in self.fields],
        }


DISK_TYPE_OPTIONS = tuple(Option(label=DISK_TYPE_LABELS[d], value=d.value) for d in DiskType)

# Archived is reached by deleting, not by editing
STATUS_OPTIONS = tuple(
    Option(label=PAN_SHARE_STATUS_LABELS[s], value=s.value)
    for s in (PanShareStatus.PENDING, PanShareStatus.PUBLISHED, PanShareStatus.REJECTED)
)


_COMMON_FIELDS = (
    FormField(name="title", label="标题", required=True, placeholder="资源标题"),
    FormField(name="description", label="简介", input="textarea"),
    FormField(
        name="content",
        label="详细内容",
        input="markdown",
        tip="支持 Markdown",
    ),
    FormField(
        name="coverImage",
        label="封面图",
        input="image",
        tip="上传图片或填写图片地址",
    ),
    FormField(
        name="diskType",
        label="网盘类型",
        input="select",
        required=True,
        options=DISK_TYPE_OPTIONS,
    ),
    FormField(
        name="shareUrl",
        label="分享链接",
        required=True,
        placeholder="https://pan.baidu.com/s/...",
    ),
    FormField(name="shareCode", label="提取码", placeholder="没有可留空"),
    FormField(
        name="expiredAt",
        label="过期时间",
        input="datetime",
        tip="留空表示永久有效",
    ),
)


ADD_FORM = FormDescriptor(
    name="add",
    title="添加网盘资源",
    submit_label="添加",
    fields=_COMMON_FIELDS,
)

EDIT_FORM = FormDescriptor(
    name="edit",
    title="编辑网盘资源",
    submit_label="保存",
    fields=_COMMON_FIELDS
    + (
        FormField(
            name="status",
            label="状态",
            input="select",
            required=True,
            options=STATUS_OPTIONS,
        ),
    ),
)

FORMS = {form.name: form for form in (ADD_FORM, EDIT_FORM)}


TABLE = (
    TableColumn(key="title", title="标题", width=240),
    TableColumn(key="diskTypeLabel", title="网盘", width=100),
    TableColumn(key="shareUrl", title="分享链接", render="link"),
    TableColumn(key="shareCode", title="提取码", width=90),
    TableColumn(key="statusLabel", title="状态", width=90, render="badge"),
    TableColumn(key="expiredAt", title="过期时间", width=160, render="datetime"),
    TableColumn(key="createdAt", title="创建时间", width=160, render="datetime"),
)


def table_descriptor() -> list[dict[str, Any]]:
    return [asdict(column) for column in TABLE]
