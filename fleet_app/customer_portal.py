from datetime import date, timedelta

import streamlit as st

from fleet_app.ai_assistant import ask_ai_assistant
from fleet_app.auth import check_admin_login, get_admin_password, reset_admin_password
from fleet_app.booking_flow import (
    IntakeRequest,
    calculate_total,
    generate_confirmation_text,
    handle_public_booking,
    validate_intake,
)
from fleet_app.chat_logic import SUPPORT_PERSONA, build_support_context, store_message
from fleet_app.errors import ValidationError
from fleet_app.inventory import bookable_vehicles

USER_AVATAR = "👤"
BOT_AVATAR = "🚐"


def render_customer_portal(cfg, store, prefs):
    st.title("🚐 KwasaShuttle Rentals")
    st.caption("Reliable 7-seater rentals across Gauteng.")

    vehicles = bookable_vehicles(store)
    if not vehicles:
        st.info("No vehicles are available right now. Please check back soon.")

    for vehicle in vehicles:
        with st.container(border=True):
            c1, c2 = st.columns([1, 2])
            c1.image(vehicle.image)
            with c2:
                st.subheader(vehicle.display_name)
                st.write(f"**R{vehicle.daily_rate:,.0f}** / day")
                with st.expander("Book this vehicle"):
                    _booking_form(store, vehicle)

    st.divider()
    run_support_chat(store)

    st.divider()
    render_admin_login(cfg, prefs)


def _booking_form(store, vehicle):
    with st.form(f"booking-{vehicle.id}"):
        name = st.text_input("Full Name")
        email = st.text_input("Email")
        phone = st.text_input("Phone")
        pickup = st.date_input("Pickup Date", value=date.today())
        return_ = st.date_input("Return Date", value=date.today() + timedelta(days=1))
        st.write(f"Estimated total: **R{calculate_total(vehicle.daily_rate, pickup, return_):,.0f}**")
        st.caption("Card details are optional. Leave empty to pay on collection.")
        card_number = st.text_input("Card Number")
        expiry = st.text_input("Expiry (MM/YY)")
        cvv = st.text_input("CVV", type="password")
        submitted = st.form_submit_button("Confirm Booking")

    if not submitted:
        return

    request = IntakeRequest(
        name=name,
        email=email,
        phone=phone,
        vehicle_id=vehicle.id,
        pickup_date=pickup.isoformat(),
        return_date=return_.isoformat(),
        total_amount=calculate_total(vehicle.daily_rate, pickup, return_),
        card_number=card_number,
        expiry=expiry,
        cvv=cvv,
    )

    errors = validate_intake(request)
    if errors:
        field, msg = next(iter(errors.items()))
        st.warning(f"⚠️ {msg}")
        return

    try:
        result = handle_public_booking(store, request)
    except ValidationError as e:
        st.error(f"⚠️ Error: {e}")
        return

    st.success("🎉 **Success!** Your booking is confirmed.")
    st.markdown(generate_confirmation_text(result))


def run_support_chat(store):
    st.subheader("💬 Ask our assistant")

    if "portal_messages" not in st.session_state:
        st.session_state.portal_messages = []

    chat_container = st.container(height=300)
    with chat_container:
        if not st.session_state.portal_messages:
            st.info("👋 Hi! Ask me about our vehicles, rates or rental requirements.")
        for msg in st.session_state.portal_messages:
            with st.chat_message(msg["role"], avatar=BOT_AVATAR if msg["role"] == "assistant" else USER_AVATAR):
                st.write(msg["content"])

    user_input = st.chat_input("Type your message...")
    if not user_input:
        return

    store_message(st.session_state.portal_messages, "user", user_input)
    with st.spinner("Thinking..."):
        answer = ask_ai_assistant(
            user_input,
            build_support_context(bookable_vehicles(store)),
            SUPPORT_PERSONA,
        )
    store_message(st.session_state.portal_messages, "assistant", answer)
    st.rerun()


def render_admin_login(cfg, prefs):
    with st.expander("🔒 Staff Login"):
        with st.form("admin-login"):
            email = st.text_input("Email", placeholder=cfg.admin.login_email)
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign In")

        if submitted:
            if check_admin_login(prefs, email, password, cfg.admin.login_email):
                st.session_state.is_admin = True
                st.rerun()
            else:
                st.error("Invalid email or password.")

        st.caption(f"Default credentials: {cfg.admin.login_email} / {get_admin_password(prefs)}")
        if st.button("Reset admin password"):
            reset_admin_password(prefs)
            st.success('Admin password has been reset to "0000"')
