from dataclasses import replace
from datetime import date

import streamlit as st

from fleet_app.ai_assistant import ask_ai_assistant, generate_daily_briefing
from fleet_app.auth import change_admin_password
from fleet_app.bookings import (
    STATUS_FILTERS,
    create_booking,
    delete_booking,
    edit_booking,
    filter_bookings,
    get_booking,
    return_vehicle,
    update_status,
)
from fleet_app.chat_logic import build_admin_context
from fleet_app.customers import add_customer, delete_customer, edit_customer, get_customer
from fleet_app.errors import Outcome, ValidationError
from fleet_app.inquiries import delete_inquiry, resolve_inquiry
from fleet_app.inventory import add_vehicle, delete_vehicle, get_vehicle, replace_vehicle
from fleet_app.payments import (
    delete_payment,
    edit_payment,
    get_payment,
    pending_revenue,
    record_payment,
    search_payments,
    total_collected,
)
from fleet_app.reports import (
    booking_status_chart,
    bookings_frame,
    dashboard_stats,
    payment_method_chart,
    payments_frame,
    revenue_by_day_chart,
    todays_pickups,
)
from fleet_db.models import BookingStatus, PaymentMethod, PaymentStatus, VehicleStatus

ADMIN_PAGES = [
    "Dashboard", "Bookings", "Inquiries", "Customers", "Fleet", "Payments", "Reports", "Settings",
]


FLASH_KEY = "admin_flash"


def queue_flash(session, message: str):
    """Keeps `message` in the session so it is shown after the rerun."""
    session[FLASH_KEY] = message


def take_flash(session):
    return session.pop(FLASH_KEY, None)


def _done(message: str):
    queue_flash(st.session_state, message)
    st.rerun()


def _report(outcome: Outcome, success: str):
    if outcome == Outcome.OK:
        _done(success)
    else:
        st.warning("That record no longer exists.")


def render_admin_dashboard(store, prefs, page: str):
    message = take_flash(st.session_state)
    if message:
        st.success(message)

    pages = {
        "Dashboard": render_overview,
        "Bookings": render_bookings,
        "Inquiries": render_inquiries,
        "Customers": render_customers,
        "Fleet": render_fleet,
        "Payments": render_payments,
        "Reports": render_reports,
    }
    if page == "Settings":
        render_settings(prefs)
    else:
        pages.get(page, render_overview)(store)


# --- DASHBOARD ---

def render_overview(store):
    st.title("📊 Admin Dashboard")
    st.caption("Welcome back to KwasaShuttle control center.")

    stats = dashboard_stats(store)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Available Vehicles", stats.available_vehicles)
    col2.metric("Active Rentals", stats.active_rentals)
    col3.metric("Total Customers", stats.total_customers)
    col4.metric("Revenue", f"R{stats.revenue:,.0f}")

    st.divider()
    st.subheader("Today's Pickups")
    pickups = todays_pickups(store)
    if not pickups:
        st.info("No pickups scheduled for today.")
    for b in pickups:
        c1, c2 = st.columns([3, 1])
        c1.write(f"**{b.customer_name}** · {b.vehicle_name} · {b.status.value}")
        if b.status == BookingStatus.ACTIVE and c2.button("Mark Returned", key=f"return-{b.id}"):
            _report(return_vehicle(store, b.id), f"{b.vehicle_name} returned.")

    st.divider()
    st.subheader("✨ AI Fleet Assistant")
    if "briefing" not in st.session_state:
        with st.spinner("Generating daily briefing..."):
            st.session_state.briefing = generate_daily_briefing(store.bookings, store.vehicles)
    st.write(st.session_state.briefing)

    question = st.text_input("Ask about your fleet")
    if st.button("Ask") and question.strip():
        with st.spinner("Thinking..."):
            answer = ask_ai_assistant(question, build_admin_context(store.vehicles, store.bookings))
        st.write(answer)


# --- BOOKINGS ---

def render_bookings(store):
    st.title("Bookings")

    status_filter = st.radio("Status", STATUS_FILTERS, horizontal=True)
    search = st.text_input("Search bookings")
    rows = filter_bookings(store, status_filter, search)

    if rows:
        st.dataframe(bookings_frame(rows), use_container_width=True)
    else:
        st.info("No bookings found.")

    st.write("### Actions")
    c1, c2 = st.columns([2, 1])
    with c1:
        booking_id = st.text_input("Booking ID")
        new_status = st.selectbox("New Status", [s.value for s in BookingStatus])
        if st.button("Update Status") and booking_id:
            _report(update_status(store, booking_id.strip(), new_status), f"Booking {booking_id} is now {new_status}.")
        if st.button("Delete Booking") and booking_id:
            _report(delete_booking(store, booking_id.strip()), f"Booking {booking_id} deleted.")

    with c2:
        st.write("### Export")
        csv = bookings_frame(rows).to_csv(index=False).encode("utf-8")
        st.download_button("📥 Download as CSV", csv, "bookings.csv", "text/csv", key="download-bookings")

    _booking_form(store)


def _booking_form(store):
    if not store.customers or not store.vehicles:
        st.info("Add a customer and a vehicle before creating bookings.")
        return

    editing_id = st.text_input("Booking ID to edit (leave empty for a new booking)")
    editing = get_booking(store, editing_id.strip()) if editing_id else None

    with st.form("booking-form"):
        customer_ids = [c.id for c in store.customers]
        vehicle_ids = [v.id for v in store.vehicles]
        customer_id = st.selectbox(
            "Customer", customer_ids,
            index=customer_ids.index(editing.customer_id) if editing and editing.customer_id in customer_ids else 0,
            format_func=lambda cid: get_customer(store, cid).name,
        )
        vehicle_id = st.selectbox(
            "Vehicle", vehicle_ids,
            index=vehicle_ids.index(editing.vehicle_id) if editing and editing.vehicle_id in vehicle_ids else 0,
            format_func=lambda vid: get_vehicle(store, vid).display_name,
        )
        pickup = st.date_input("Pickup Date", value=editing.pickup_date if editing else date.today())
        return_ = st.date_input("Return Date", value=editing.return_date if editing else date.today())
        total = st.number_input("Total Amount (R)", min_value=0.0, value=float(editing.total_amount) if editing else 0.0)
        submitted = st.form_submit_button("Save Booking" if editing else "Create Booking")

    if not submitted:
        return

    if editing:
        # The admin form re-captures the display names of the chosen records.
        customer = get_customer(store, customer_id)
        vehicle = get_vehicle(store, vehicle_id)
        updated = replace(
            editing,
            customer_id=customer.id,
            vehicle_id=vehicle.id,
            customer_name=customer.name,
            vehicle_name=vehicle.display_name,
            pickup_date=pickup,
            return_date=return_,
            total_amount=float(total),
        )
        _report(edit_booking(store, updated), f"Booking {editing.id} updated.")
        return

    try:
        booking = create_booking(store, customer_id, vehicle_id, pickup, return_, total)
    except ValidationError as e:
        st.error(str(e))
        return
    _done(f"Booking {booking.id} created.")


# --- INQUIRIES ---

def render_inquiries(store):
    st.title("Inquiries")
    if not store.inquiries:
        st.info("No inquiries.")
    for inquiry in store.inquiries:
        with st.container(border=True):
            st.write(f"**{inquiry.subject}** · {inquiry.name} · {inquiry.date} · {inquiry.status.value}")
            st.write(inquiry.message)
            c1, c2 = st.columns(2)
            if c1.button("Resolve", key=f"resolve-{inquiry.id}"):
                _report(resolve_inquiry(store, inquiry.id), "Inquiry resolved.")
            if c2.button("Delete", key=f"delete-inq-{inquiry.id}"):
                _report(delete_inquiry(store, inquiry.id), "Inquiry deleted.")


# --- CUSTOMERS ---

def render_customers(store):
    st.title("Customers")
    st.dataframe(
        [
            {"id": c.id, "name": c.name, "email": c.email, "phone": c.phone, "total rentals": c.total_rentals}
            for c in store.customers
        ],
        use_container_width=True,
    )

    editing_id = st.text_input("Customer ID to edit or delete (leave empty to add)")
    editing = get_customer(store, editing_id.strip()) if editing_id else None

    with st.form("customer-form"):
        name = st.text_input("Name", value=editing.name if editing else "")
        email = st.text_input("Email", value=editing.email if editing else "")
        phone = st.text_input("Phone", value=editing.phone if editing else "")
        submitted = st.form_submit_button("Save Customer" if editing else "Add Customer")

    if submitted:
        if editing:
            _report(edit_customer(store, editing.id, name, email, phone), "Customer updated.")
        elif name and email:
            add_customer(store, name, email, phone)
            _done("Customer added.")
        else:
            st.warning("Name and email are required.")

    if editing and st.button("Delete Customer"):
        _report(delete_customer(store, editing.id), "Customer deleted.")


# --- FLEET ---

def render_fleet(store):
    st.title("Fleet")
    for v in store.vehicles:
        with st.container(border=True):
            c1, c2 = st.columns([1, 3])
            c1.image(v.image)
            c2.write(f"**{v.display_name}** · {v.plate} · R{v.daily_rate:,.0f}/day · {v.status.value}")
            c2.caption(f"ID: {v.id}")

    editing_id = st.text_input("Vehicle ID to edit or delete (leave empty to add)")
    editing = get_vehicle(store, editing_id.strip()) if editing_id else None
    statuses = [s.value for s in VehicleStatus]

    with st.form("vehicle-form"):
        make = st.text_input("Make", value=editing.make if editing else "")
        model = st.text_input("Model", value=editing.model if editing else "")
        plate = st.text_input("Plate", value=editing.plate if editing else "")
        rate = st.number_input("Daily Rate (R)", min_value=0.0, value=float(editing.daily_rate) if editing else 0.0)
        status = st.selectbox(
            "Status", statuses,
            index=statuses.index(editing.status.value) if editing else 0,
        )
        submitted = st.form_submit_button("Save Vehicle" if editing else "Add Vehicle")

    if submitted:
        if editing:
            updated = replace(
                editing, make=make, model=model, plate=plate,
                daily_rate=float(rate), status=VehicleStatus(status),
            )
            _report(replace_vehicle(store, updated), "Vehicle updated.")
        else:
            try:
                add_vehicle(store, make, model, plate, rate, VehicleStatus(status))
            except ValidationError as e:
                st.error(str(e))
                return
            _done("Vehicle added.")

    if editing and st.button("Delete Vehicle"):
        _report(delete_vehicle(store, editing.id), "Vehicle deleted.")


# --- PAYMENTS ---

def render_payments(store):
    st.title("Payments")
    term = st.text_input("Search payments")
    st.dataframe(payments_frame(search_payments(store.payments, term)), use_container_width=True)

    if not store.bookings:
        st.info("No bookings to record payments against.")
        return

    editing_id = st.text_input("Payment ID to edit or delete (leave empty to record a new one)")
    editing = get_payment(store, editing_id.strip()) if editing_id else None
    booking_ids = [b.id for b in store.bookings]
    methods = [m.value for m in PaymentMethod]
    statuses = [s.value for s in PaymentStatus]

    with st.form("payment-form"):
        booking_id = st.selectbox(
            "Booking", booking_ids,
            index=booking_ids.index(editing.booking_id) if editing and editing.booking_id in booking_ids else 0,
            format_func=lambda bid: f"{bid} · {get_booking(store, bid).customer_name}",
        )
        amount = st.number_input("Amount (R)", min_value=0.0, value=float(editing.amount) if editing else 0.0)
        paid_on = st.date_input("Payment Date", value=editing.date if editing else date.today())
        method = st.selectbox("Method", methods, index=methods.index(editing.method.value) if editing else 0)
        status = st.selectbox("Status", statuses, index=statuses.index(editing.status.value) if editing else 0)
        submitted = st.form_submit_button("Save Payment" if editing else "Record Payment")

    if submitted:
        if editing:
            booking = get_booking(store, booking_id)
            updated = replace(
                editing,
                booking_id=booking.id,
                customer_name=booking.customer_name,
                amount=float(amount),
                date=paid_on,
                method=PaymentMethod(method),
                status=PaymentStatus(status),
            )
            _report(edit_payment(store, updated), "Payment updated.")
        else:
            try:
                record_payment(store, booking_id, amount, paid_on, method, status)
            except ValidationError as e:
                st.error(str(e))
                return
            _done("Payment recorded.")

    if editing and st.button("Delete Payment"):
        _report(delete_payment(store, editing.id), "Payment deleted.")


# --- REPORTS ---

def render_reports(store):
    st.title("Reports & Analytics")

    col1, col2 = st.columns(2)
    col1.metric("Total Collected", f"R{total_collected(store.payments):,.0f}")
    col2.metric("Pending", f"R{pending_revenue(store.payments):,.0f}")

    st.plotly_chart(revenue_by_day_chart(store.payments), use_container_width=True)
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(payment_method_chart(store.payments), use_container_width=True)
    with c2:
        st.plotly_chart(booking_status_chart(store.bookings), use_container_width=True)


# --- SETTINGS ---

def render_settings(prefs):
    st.title("Settings")
    st.subheader("Security")
    st.caption(
        "Changing your password will update the required credentials for accessing "
        "the administrative dashboard from the public website."
    )

    with st.form("password-form"):
        current = st.text_input("Current Password", type="password")
        new = st.text_input("New Password", type="password")
        confirm = st.text_input("Confirm New Password", type="password")
        submitted = st.form_submit_button("Update Password")

    if submitted:
        ok, message = change_admin_password(prefs, current, new, confirm)
        if ok:
            st.success(message)
        else:
            st.error(message)
