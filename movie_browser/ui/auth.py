import streamlit as st

from movie_browser.errors import MovieBrowserError, ValidationError
from movie_browser.routing import DASHBOARD, LOGIN, REGISTER


def go_to(page):
    """Navigates to another page role and reruns the app."""
    st.query_params["page"] = page
    st.rerun()


def submit_register(credentials, name, email, password, confirm_password):
    """
    Validates the registration form and creates the account.

    Returns:
        tuple[bool, dict]: Whether registration succeeded, and the error
        messages keyed by "confirm", "field" or "global".
    """
    if password != confirm_password:
        return False, {"confirm": "Passwords do not match"}
    try:
        credentials.register(name.strip(), email.strip(), password)
    except ValidationError as exc:
        return False, {"field" if exc.field else "global": exc.message}
    except MovieBrowserError as exc:
        return False, {"global": exc.message}
    return True, {}


def submit_login(credentials, email, password):
    """
    Attempts a login.

    Returns:
        str | None: The message to show, or None on success.
    """
    try:
        credentials.login(email.strip(), password)
    except MovieBrowserError as exc:
        return exc.message
    return None


def render_login(credentials):
    """
    Renders the login form.

    On success the session is stored by the credential store and the user
    is sent to the dashboard.
    """
    st.header("Sign In")
    if st.session_state.pop("registered", False):
        st.success("Registration successful! Please login.")

    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submit = st.form_submit_button("Sign In")

        if submit:
            error = submit_login(credentials, email, password)
            if error:
                st.error(error)
            else:
                go_to(DASHBOARD)

    if st.button("New here? Create an account"):
        go_to(REGISTER)


def render_register(credentials):
    """
    Renders the registration form.

    Asks for name, email, password and its confirmation. Registration does
    not log the user in; on success the login page is shown.
    """
    st.header("Create Account")
    with st.form("register_form"):
        name = st.text_input("Full Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        confirm_password = st.text_input("Confirm Password", type="password")
        submit = st.form_submit_button("Sign Up")

        if submit:
            ok, errors = submit_register(
                credentials, name, email, password, confirm_password
            )
            if ok:
                st.session_state["registered"] = True
                go_to(LOGIN)
            for message in errors.values():
                st.error(message)

    if st.button("Already have an account? Sign in"):
        go_to(LOGIN)
