from dataclasses import dataclass


@dataclass(frozen=True)
class Testimonial:
    quote: str
    author: str
    role: str


TESTIMONIALS: list[Testimonial] = [
    Testimonial(
        quote="FlowGenie saved me hours of work. I was able to create a complex email automation workflow in minutes!",
        author="Sarah Johnson",
        role="Marketing Manager",
    ),
    Testimonial(
        quote="As a non-technical founder, I never thought I could build automations myself. FlowGenie changed that completely.",
        author="Michael Chen",
        role="Startup Founder",
    ),
    Testimonial(
        quote="The JSON export feature is a game-changer. I can now create and share workflows with my team effortlessly.",
        author="Alex Rodriguez",
        role="Operations Director",
    ),
]
