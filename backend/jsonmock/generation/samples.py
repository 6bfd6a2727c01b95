# File: jsonmock/generation/samples.py
"""Thematic sample pools used for string fields."""

SAMPLE_NAMES = [
    "Aarav Sharma", "Diya Patel", "Rohan Mehta", "Ananya Iyer", "Karan Nair",
    "Sneha Reddy", "Vikram Kapoor", "Ishita Joshi", "Raj Malhotra", "Pooja Desai",
    "Aditya Rao", "Nikita Singh", "Arjun Verma", "Priya Agarwal", "Manav Bhatt",
    "Neha Choudhary", "Siddharth Bansal", "Kritika Menon", "Rahul Sinha", "Riya Das",
    "Ayaan Trivedi", "Tanvi Shetty", "Devansh Ghosh", "Meera Pillai", "Yash Mahajan",
    "Saanvi Kulkarni", "Akhil Saxena", "Lavanya Dutta", "Rudra Joshi", "Shreya Pandey",
    "Ishan Kaur", "Bhavna Rathi", "Amitabh Chauhan", "Kavya Sehgal", "Mohit Dubey",
    "Nandini Batra", "Krishna Vora", "Anjali Jain", "Tanishq Tyagi", "Simran Kohli",
    "Paras Rawat", "Mitali Banerjee", "Varun Chatterjee", "Aishwarya Gopal", "Deepak Raina",
    "Payal Chopra", "Harsh Venkatesh", "Rachna Bhattacharya", "Sagar Patil", "Trisha Naik",
]

SAMPLE_WORDS = [
    "innovation", "development", "technology", "solution", "project",
    "analysis", "research", "strategy", "optimization", "implementation",
    "framework", "architecture", "platform", "integration", "automation",
]

SAMPLE_CITIES = [
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Ahmedabad",
    "Chennai", "Kolkata", "Pune", "Jaipur", "Lucknow",
    "Kanpur", "Nagpur", "Indore", "Bhopal", "Patna",
    "Vadodara", "Ludhiana", "Agra", "Nashik", "Faridabad",
    "Meerut", "Rajkot", "Varanasi", "Srinagar", "Amritsar",
    "Ranchi", "Coimbatore", "Vijayawada", "Jodhpur", "Raipur",
    "Guwahati", "Chandigarh", "Solapur", "Hubli", "Mysore",
    "Tiruchirappalli", "Jalandhar", "Bhubaneswar", "Noida", "Gwalior",
    "Thiruvananthapuram", "Aurangabad", "Salem", "Warangal", "Tirupati",
    "Udaipur", "Dehradun", "Allahabad", "Aligarh", "Jamshedpur",
]

SAMPLE_STREETS = [
    "MG Road", "Netaji Subhash Marg", "Nehru Street", "Jawahar Road", "Gandhi Path",
    "Rajpath", "Lal Bahadur Shastri Marg", "Indira Nagar", "Ashok Vihar", "Sarojini Street",
    "Bapu Bazaar Road", "Anna Salai", "Kasturba Gandhi Road", "Tilak Marg", "Bhagat Singh Road",
    "Vivekananda Street", "Ambedkar Chowk", "Patel Nagar", "Tagore Avenue", "Rani Laxmi Bai Road",
    "Sardar Vallabhbhai Patel Marg", "Krishna Nagar", "Shivaji Path", "Chandni Chowk", "Hanuman Galli",
    "Dharampeth Extension", "Malviya Road", "Shastri Street", "Subhash Chowk", "Azad Nagar Lane",
    "Gokhale Marg", "Rajendra Path", "Deshbandhu Road", "Nizamuddin Lane", "Park Town Road",
    "Mira Bai Marg", "Narayan Das Street", "Ravindra Nagar", "Lokmanya Tilak Road", "Sai Baba Lane",
    "Basaveshwara Road", "Tagore Marg", "Raja Ram Mohan Roy Street", "Kali Temple Lane", "Mahatma Gandhi Road",
    "Bose Lane", "Sarvapalli Radhakrishnan Street", "Chhatrapati Shivaji Marg", "Balaji Nagar Lane", "Temple Street",
]

SAMPLE_EMAILS = [
    "user@example.com", "contact@company.com", "info@business.org",
    "admin@service.net", "support@platform.io",
]

# Pool kind -> samples
SAMPLE_POOLS = {
    "name": SAMPLE_NAMES,
    "email": SAMPLE_EMAILS,
    "city": SAMPLE_CITIES,
    "street": SAMPLE_STREETS,
    "word": SAMPLE_WORDS,
}

# Name inference rules, first match wins
POOL_RULES = [
    ("name", ("name", "title", "author")),
    ("email", ("email",)),
    ("city", ("city",)),
    ("street", ("street", "address")),
]


def infer_string_pool(field_name: str) -> str:
    """Pick the sample pool for a string field from its name."""
    name = field_name.lower()
    for pool, needles in POOL_RULES:
        if any(needle in name for needle in needles):
            return pool
    return "word"
