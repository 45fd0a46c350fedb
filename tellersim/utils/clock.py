"""Wall-clock style formatting of simulation minutes."""

from tellersim.core.customer import Customer


def format_clock(minute: int) -> str:
    """Format a minute of the day as HH:MM. Hours keep counting past 23."""
    hours, minutes = divmod(minute, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_customer(customer: Customer) -> str:
    """Multi-line trace of one customer, as printed by `tellersim once`."""
    return "\n".join([
        f"Customer {customer.index}:",
        f"\tArrival   : {format_clock(customer.arrival_time)}",
        f"\tServedTime: {format_clock(customer.served_time)} (by server {customer.server})"
        f" (WaitTime = {customer.wait_time} minutes)",
        f"\tFinishTime: {format_clock(customer.finish_time)}"
        f" (ServiceTime = {customer.service_time} minutes)",
    ])
