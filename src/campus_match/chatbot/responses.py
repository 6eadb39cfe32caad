"""Canned chatbot responses."""

from typing import Optional

from campus_match.models.investor import InvestorProfile

EMPTY_QUERY = "How can I help you today?"

STARTUP_INFO = """**Discovering Startups:**

You can find startups in several ways:

**1. Browse All Startups:**
- Visit the "Startups" page to see all approved startups
- Filter by category (Fintech, Edtech, Healthtech, etc.)
- Sort by upvotes, date, or stage

**2. AI-Powered Semantic Search:**
- Use natural language to describe what you're looking for
- Example: "Show me startups working on AI for education"

**3. AI Recommendations (Investors):**
- Personalized startup suggestions based on your investment domains
- Includes compatibility scores

**4. Category-Based Search:**
- Ask me: "Show me fintech startups"

Try asking me something like:
- "Show me fintech startups"
- "Find edtech companies"
- "Recommend startups for me" (if you're an investor)

What type of startups are you interested in?"""

INVESTMENT_HOW = """**Investment Guidance for Startups:**

**1. Due Diligence Checklist:**
- Review the business model and revenue streams
- Check team background and experience
- Analyze market size and competition
- Evaluate product-market fit
- Assess financial projections and burn rate

**2. Key Metrics to Consider:**
- Monthly Recurring Revenue (MRR) growth
- Customer Acquisition Cost (CAC) and Lifetime Value (LTV)
- Churn rate, traction and user engagement

**3. Investment Stages:**
- **Pre-seed/Seed**: early stage, higher risk, potential for high returns
- **Series A/B**: more established, lower risk, moderate returns
- **Growth Stage**: mature startups, lower risk, steady returns

**4. Red Flags to Watch:**
- Unrealistic valuations
- Weak team or high turnover
- No clear path to profitability
- Over-reliance on a single customer

**5. Best Practices:**
- Diversify your portfolio across sectors
- Invest only what you can afford to lose
- Track your investments regularly

Would you like me to find startups matching your investment criteria?"""

INVESTMENT_WHERE = """**Finding Investment Opportunities:**

I can help you discover startups by:
- **Category**: Fintech, Edtech, Healthtech, AI/ML, etc.
- **Stage**: Pre-seed, Seed, Series A, Growth
- **AI Recommendations**: Personalized matches based on your profile
- **Trending**: Most upvoted and popular startups

Try asking me:
- "Show me fintech startups"
- "Find early stage AI companies"
- "Recommend startups for me" (if you're an investor)

What type of startups are you interested in?"""

_INVESTMENT_FEATURES = """**Investment Features:**

As an investor on Campus Founders, you can:
- **Browse Startups**: View all approved startups with detailed information
- **AI Recommendations**: Get personalized startup suggestions based on your interests
- **Compatibility Scores**: See how well startups match your investment profile
- **Connect with Founders**: Message founders directly (Premium feature)
- **Track Investments**: Monitor your investment commitments
- **Investment Analysis**: View AI-powered investment potential scores

**To get started:**
1. Complete your investor profile with investment domains
2. Browse the Startups page
3. Use AI recommendations for personalized matches
4. Review startup details and investment potential
5. Connect with founders and make investment commitments

{access}

Would you like me to help you find specific types of startups or explain any investment feature in detail?"""

PROFILE = (
    "To manage your profile:\n"
    "1. Go to your Profile page\n"
    "2. Update your bio, interests, and investment domains\n"
    "3. Complete your onboarding\n\n"
    "A complete profile helps AI provide better recommendations!"
)

CATEGORY_DESCRIPTIONS: dict[str, str] = {
    "fintech": "Financial Technology - Startups using technology to improve financial services, payments, banking, insurance, and investment management.",
    "edtech": "Educational Technology - Companies developing technology solutions for education, learning platforms, online courses, and educational tools.",
    "healthtech": "Health Technology - Startups focused on healthcare innovation, telemedicine, health monitoring, medical devices, and wellness solutions.",
    "ai": "Artificial Intelligence - Companies leveraging AI and machine learning for automation, predictions, and intelligent systems.",
    "ml": "Machine Learning - Startups using ML algorithms for data analysis, pattern recognition, and predictive modeling.",
    "blockchain": "Blockchain Technology - Companies building on blockchain for cryptocurrencies, smart contracts, decentralized applications, and Web3 solutions.",
    "saas": "Software as a Service - Cloud-based software solutions delivered as subscription services for businesses and consumers.",
    "e-commerce": "E-Commerce - Online retail platforms, marketplaces, and digital commerce solutions.",
    "agritech": "Agricultural Technology - Startups using technology to improve farming, food production, and agricultural efficiency.",
    "iot": "Internet of Things - Companies developing connected devices and IoT solutions for smart homes, cities, and industries.",
    "climatetech": "Climate Technology - Startups focused on environmental solutions, renewable energy, carbon reduction, and sustainability.",
    "proptech": "Property Technology - Real estate technology for property management, transactions, and smart buildings.",
    "foodtech": "Food Technology - Companies innovating in food production, delivery, alternative proteins, and food safety.",
    "gaming": "Gaming Technology - Game development studios, gaming platforms, esports, and interactive entertainment.",
}

NAVIGATION = """**Platform Navigation Guide:**

**Main Pages:**
- **Home** - Dashboard with featured startups and quick access
- **Startups** - Browse all approved startups with filters
- **Investors** - View investor profiles and connect
- **Connections** - Manage your network and friends
- **Resources** - Access courses and learning materials (Premium)
- **Profile** - Edit your profile and manage settings

**For Founders:**
- Go to Profile -> Create/Edit Startup
- Submit for approval once complete
- Track upvotes and reviews

**For Investors:**
- Browse the Startups page
- Use AI recommendations
- Connect with founders (Premium)
- Make investment commitments

Need help with a specific page or feature? Just ask!"""

HELP_FIND_STARTUPS = """**How to Find Startups:**

**Method 1: Browse Page**
1. Go to the "Startups" page
2. Use filters to narrow by category or stage
3. Click on any startup to see details

**Method 2: Ask Me**
- "Show me fintech startups"
- "Find AI companies"
- "List edtech startups"

**Method 3: AI Search**
1. Go to the Startups page
2. Click the sparkles icon to enable AI search
3. Type natural language queries like "startups using blockchain for finance"

**Method 4: AI Recommendations (Investors)**
1. Complete your investor profile
2. Ask me: "Recommend startups for me"

Try asking me to find specific types of startups now!"""

HELP_INVEST = """**How to Invest:**

1. **Get Investor Access:** sign up as an investor, complete your profile, get approved by an admin
2. **Find Startups:** browse the Startups page, use AI recommendations, or ask me
3. **Review Startup Details:** business model, metrics, team, traction and investment potential score
4. **Make an Investment Commitment:** click "Invest" on the startup page, enter the amount, choose Committed or Pending
5. **Track Investments:** monitor committed vs pending amounts on your dashboard

**Tips:**
- Do thorough research before investing
- Start with smaller amounts
- Diversify across sectors

Would you like me to help you find startups to invest in?"""

HELP_CREATE_STARTUP = """**How to Create/Submit a Startup:**

1. **Create Your Startup:** go to your Profile page, click "Create Startup" and fill in name, tagline, description, category, stage, logo, team and roadmap
2. **Complete Your Profile:** add team members, screenshots and company registration details
3. **Submit for Approval:** click "Submit for Approval" and wait for admin review
4. **After Approval:** your startup is visible to all users, investors can discover and invest, and you can track upvotes and reviews

Need help with any specific step?"""

HELP_GENERAL = """**How I Can Help You:**

**Finding Startups:**
- Ask me to find startups by category
- Use AI-powered semantic search
- Get personalized recommendations (investors)

**Investment Guidance:**
- Investment strategies, startup metrics, tips and best practices

**Startup Information:**
- Startup categories and stages

**Examples of what you can ask:**
- "Show me fintech startups"
- "How do I invest in startups?"
- "Tell me about edtech companies"
- "Recommend startups for me"

What would you like to know?"""

FEATURES = """**AI Features on Campus Founders:**

1. **AI-Powered Recommendations** - personalized startup suggestions with compatibility scores
2. **Semantic Search** - find startups by describing what you want
3. **Text Summarization** - quick overviews of long descriptions
4. **Sentiment Analysis** - understand community feedback on reviews
5. **Auto-Tagging** - automatic tags for better discoverability
6. **Investment Prediction** - investment potential scores and risk assessment
7. **AI Chatbot** - that's me! Finding startups, investment guidance, platform navigation

Which feature would you like to learn more about?"""

STAGES = """**Startup Stages Explained:**

**Pre-Seed Stage:** very early, often just an idea; self-funded or friends & family; building an MVP. High risk, high potential.

**Seed Stage:** product launched with initial traction; first external funding; proving product-market fit.

**Series A:** proven business model, significant revenue or users, scaling operations.

**Series B & Beyond:** strong revenue and growth, expanding to new markets, path to profitability.

**Growth Stage:** mature startup with an established market position and consistent revenue.

Would you like me to find startups at a specific stage?"""


def greeting(lower_query: str, name: str) -> str:
    if "good morning" in lower_query:
        salutation = "Good morning"
    elif "good afternoon" in lower_query:
        salutation = "Good afternoon"
    elif "good evening" in lower_query:
        salutation = "Good evening"
    else:
        salutation = "Hello"
    return (
        f"{salutation} {name}! I'm your AI assistant for Campus Founders. I can help you with:\n\n"
        "- Finding startups by category or description\n"
        "- Investment guidance and recommendations\n"
        "- Startup analysis and insights\n"
        "- Platform navigation\n"
        "- Startup and investment advice\n\n"
        "What would you like to explore today?"
    )


def investment_features(user: Optional[InvestorProfile]) -> str:
    if user is not None and user.is_approved_investor:
        access = (
            "Since you're an approved investor, you can start investing right away! "
            "Try asking me to recommend startups for you."
        )
    elif user is not None and user.is_investor:
        access = (
            "Your investor profile is pending approval. "
            "Once approved, you'll have full access to investment features."
        )
    else:
        access = "To access investment features, you'll need to sign up as an investor and get approved."
    return _INVESTMENT_FEATURES.format(access=access)


def category_explanation(category: str) -> str:
    name = category[:1].upper() + category[1:]
    return (
        f"**{name}** - {CATEGORY_DESCRIPTIONS[category]}\n\n"
        f'Want to see {category} startups? Just ask: "Show me {category} startups"'
    )


def thanks(name: str) -> str:
    return (
        f"You're welcome, {name}! I'm always here to help you discover amazing startups "
        "and make informed investment decisions. Feel free to ask me anything anytime!\n\n"
        "Is there anything else you'd like to know?"
    )


def goodbye(name: str) -> str:
    return (
        f"Goodbye {name}! It was great helping you today. Come back anytime if you need "
        "assistance finding startups or investment guidance. Have a great day!"
    )


def default(name: str) -> str:
    return (
        f"I'm here to help you, {name}! I can assist with:\n\n"
        '**Finding Startups:** "Show me fintech startups", "Find AI companies", "Recommend startups for me"\n\n'
        '**Investment Guidance:** "How do I invest?", "Investment tips"\n\n'
        '**Learning:** "What is fintech?", "Explain startup stages"\n\n'
        '**Platform Help:** "How do I find startups?", "What features are available?", "Help me navigate"\n\n'
        "Try asking me something specific, or use one of the suggestions above!"
    )


def startups_found(count: int, category: str) -> str:
    noun = "startup" if count == 1 else "startups"
    label = f"{category} " if category else ""
    return f"Great! I found {count} {label}{noun} for you:"


def no_startups(category: str, alternatives: str) -> str:
    if category:
        return (
            f"Sorry, I couldn't find any {category} startups at the moment. "
            f"Try searching for other categories like {alternatives}!"
        )
    return (
        "Sorry, I couldn't find any startups matching your query. "
        f"Try searching for specific categories like {alternatives}!"
    )


def investors_found(count: int) -> str:
    noun = "investor" if count == 1 else "investors"
    return f"Great! I found {count} verified {noun} for you:"


NO_INVESTORS = "Sorry, I couldn't find any verified investors at the moment. Check back later!"
