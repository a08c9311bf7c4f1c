import pytest
from werkzeug.security import generate_password_hash

from claim_system.auth.context import RequestContext
from claim_system.auth.identity import Account, StaticIdentityProvider, demo_accounts
from claim_system.auth.service import AuthService
from claim_system.core.enums import Role
from claim_system.core.exceptions import AuthenticationError, AuthorizationError


@pytest.fixture(scope="module")
def auth():
    return AuthService(StaticIdentityProvider(demo_accounts()))


def test_lecturer_credentials_map_to_lecturer_role(auth):
    identity = auth.login("lecturer", "123")
    assert identity.role == Role.LECTURER
    assert identity.display_name == "Demo Lecturer"
    assert auth.landing_endpoint(identity.role) == "submit_claim"


def test_coordinator_credentials_map_to_coordinator_role(auth):
    identity = auth.login("coordinator", "123")
    assert identity.role == Role.COORDINATOR
    assert auth.landing_endpoint(identity.role) == "manage_claims"


@pytest.mark.parametrize(
    "username, password",
    [("lecturer", "wrong"), ("coordinator", ""), ("admin", "123"), ("", "")],
)
def test_bad_credentials_give_one_generic_error(auth, username, password):
    with pytest.raises(AuthenticationError) as exc:
        auth.login(username, password)
    assert str(exc.value) == "Invalid username or password."


def test_provider_can_be_swapped_for_other_accounts():
    provider = StaticIdentityProvider(
        [Account("mary", generate_password_hash("s3cret"), "Dr Mary Jones", Role.LECTURER)]
    )
    assert provider.authenticate("mary", "s3cret").display_name == "Dr Mary Jones"
    assert provider.authenticate("lecturer", "123") is None


def test_corrupt_password_hash_never_authenticates():
    provider = StaticIdentityProvider([Account("x", "CHANGE_ME", "X", Role.LECTURER)])
    assert provider.authenticate("x", "CHANGE_ME") is None


def test_request_context_from_session():
    ctx = RequestContext.from_session({"role": "Coordinator", "name": "Demo Coordinator"})
    assert ctx == RequestContext(role=Role.COORDINATOR, display_name="Demo Coordinator")
    assert RequestContext.from_session({}) is None
    assert RequestContext.from_session({"role": "admin"}) is None


def test_request_context_require():
    ctx = RequestContext(role=Role.LECTURER, display_name="L")
    ctx.require(Role.LECTURER)
    with pytest.raises(AuthorizationError):
        ctx.require(Role.COORDINATOR)
