import pytest

from contentkit.models import (
    ConstraintDetail,
    Constraint,
    ContentTypeSnapshot,
    DetailItem,
    EntrySnapshot,
    Permissions,
    Policies,
    Role,
    ScheduledAction,
    Space,
    Sys,
    Usage,
    User,
    Webhook,
    WebhookCall,
    WebhookHeader,
    WebhookHealth,
)


def _role():
    return Role(
        sys=Sys(id="role-id", version=4),
        name="Author",
        description="Describes the author",
        policies=[
            Policies(
                effect="allow",
                actions=["create"],
                constraint=Constraint(
                    and_=[ConstraintDetail(equals=DetailItem(doc={"doc": "sys.type"}, item_type="Entry"))]
                ),
            )
        ],
        permissions=Permissions(content_model=["read"], settings="all"),
    )


def test_sys_omits_empty_fields():
    assert Sys(id="abc").to_dict() == {"id": "abc"}


def test_sys_nested_space_serialises_writable_fields_only():
    sys = Sys(space=Space(sys=Sys(id="inner"), name="n"))
    assert sys.to_dict() == {"space": {"name": "n"}}


def test_space_to_dict_drops_sys():
    space = Space(sys=Sys(id="x", version=3), name="new space", default_locale="en")
    assert space.to_dict() == {"name": "new space", "defaultLocale": "en"}


def test_space_from_dict_reads_sys():
    space = Space.from_dict({"sys": {"id": "id1", "version": 2}, "name": "n"})
    assert space.sys.id == "id1"
    assert space.version() == 2
    assert space.name == "n"


@pytest.mark.parametrize("model", [Space, Role, ScheduledAction, Webhook])
def test_version_defaults_to_one_without_sys(model):
    assert model().version() == 1


def test_version_follows_sys():
    assert ScheduledAction(sys=Sys(version=2)).version() == 2
    assert Webhook(sys=Sys(version=7)).version() == 7


def test_role_round_trip():
    role = _role()
    assert Role.from_dict(role.to_dict()) == role


def test_role_json_keys():
    data = _role().to_dict()
    equals = data["policies"][0]["constraint"]["and"][0]["equals"]
    assert equals == {"Doc": {"doc": "sys.type"}, "ItemType": "Entry"}
    assert data["permissions"]["ContentModel"] == ["read"]
    assert data["name"] == "Author"


def test_role_without_sys_emits_null():
    assert Role(name="r").to_dict()["sys"] is None


def test_null_pointer_field_decodes_to_none():
    assert Role.from_dict({"sys": None, "name": "r"}) == Role(name="r")


def test_unknown_keys_ignored():
    assert Sys.from_dict({"id": "a", "unexpected": 1}) == Sys(id="a")


def test_from_dict_rejects_non_object():
    with pytest.raises(TypeError):
        Role.from_dict(["not", "an", "object"])


def test_user_two_factor_key():
    user = User.from_dict({"email": "someone@example.com", "2faEnabled": True})
    assert user.two_factor_authentication_enabled is True
    assert user.email == "someone@example.com"
    assert "2faEnabled" in user.to_dict()


def test_webhook_omits_empty_fields():
    assert Webhook(name="w").to_dict() == {"name": "w"}


def test_webhook_round_trip():
    hook = Webhook(
        sys=Sys(id="h", created_at="2020"),
        name="w",
        url="https://webhooks.example.com/endpoint",
        topics=["Entry.create"],
        headers=[WebhookHeader(key="k", value="v")],
    )
    assert Webhook.from_dict(hook.to_dict()) == hook


def test_webhook_call_decode():
    call = WebhookCall.from_dict(
        {
            "sys": {"id": "bar"},
            "request": {"url": "https://webhooks.example.com/endpoint", "method": "POST"},
            "statusCode": 200,
        }
    )
    assert call.sys.id == "bar"
    assert call.request.url == "https://webhooks.example.com/endpoint"
    assert call.status_code == 200


def test_webhook_health_decode():
    health = WebhookHealth.from_dict({"sys": {"id": "bar"}, "calls": {"total": 233, "healthy": 230}})
    assert health.calls.total == 233
    assert health.calls.healthy == 230


def test_usage_decodes_usage_key():
    usage = Usage.from_dict(
        {"sys": {"id": "u", "type": "SpacePeriodicUsage"}, "usage": 42, "dateRange": {"startAt": "s"}}
    )
    assert usage.total_usage == 42
    assert usage.sys.type == "SpacePeriodicUsage"
    assert usage.date_range.start_at == "s"


def test_entry_snapshot_decode():
    snap = EntrySnapshot.from_dict({"snapshot": {"fields": {"title": {"en-US": "Hello, World!"}}}})
    assert snap.snapshot.fields["title"]["en-US"] == "Hello, World!"


def test_content_type_snapshot_round_trip():
    snap = ContentTypeSnapshot.from_dict(
        {"snapshot": {"name": "Blog Post", "fields": [{"id": "title", "required": True}]}}
    )
    assert snap.snapshot.name == "Blog Post"
    assert snap.snapshot.fields[0].required is True
    assert ContentTypeSnapshot.from_dict(snap.to_dict()) == snap


def test_scheduled_action_round_trip():
    action = ScheduledAction(sys=Sys(version=2), scheduled_for={"datetime": "x"}, action="publish")
    data = action.to_dict()
    assert data["action"] == "publish"
    assert ScheduledAction.from_dict(data) == action